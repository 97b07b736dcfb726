from .catalog import MonkeyCatalog
from .counter import AccessCounter
from .registry import MonkeyExplorerService, build_service, load_catalog

__all__ = ["AccessCounter", "MonkeyCatalog", "MonkeyExplorerService", "build_service", "load_catalog"]
