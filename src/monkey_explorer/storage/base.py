from __future__ import annotations

from typing import Any, Dict, List, Protocol


class CatalogLoadError(ValueError):
    """raised when a dataset cannot be read or is not a json array"""


class CatalogSource(Protocol):
    """where the catalog rows come from; read once at startup"""

    def load(self) -> List[Dict[str, Any]]:
        """return the raw dataset rows in order"""
        ...

    def describe(self) -> str:
        """short label used in log messages"""
        ...
