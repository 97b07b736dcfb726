from .base import CatalogLoadError, CatalogSource
from .json_store import EmbeddedSource, JsonFileSource

__all__ = ["CatalogLoadError", "CatalogSource", "EmbeddedSource", "JsonFileSource"]
