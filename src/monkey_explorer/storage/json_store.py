from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List

from .base import CatalogLoadError


def parse_rows(text: str, origin: str) -> List[Dict[str, Any]]:
    # shared by both sources: text must hold a json array
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{origin} is not valid json: {e}") from e
    if not isinstance(data, list):
        raise CatalogLoadError(f"{origin} must contain a json array of objects")
    return data


class JsonFileSource:
    """read-only json file dataset, chosen at startup via --data"""

    def __init__(self, file_path: str | Path):
        self.path = Path(file_path)

    def load(self) -> List[Dict[str, Any]]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogLoadError(f"cannot read {self.path}: {e}") from e
        return parse_rows(text, str(self.path))

    def describe(self) -> str:
        return f"file {self.path}"


class EmbeddedSource:
    """the reference dataset bundled with the package"""

    package = "monkey_explorer.data"
    resource = "monkeys.json"

    def load(self) -> List[Dict[str, Any]]:
        try:
            text = resources.files(self.package).joinpath(self.resource).read_text(encoding="utf-8")
        except (OSError, ModuleNotFoundError) as e:
            raise CatalogLoadError(f"embedded dataset unavailable: {e}") from e
        return parse_rows(text, "embedded dataset")

    def describe(self) -> str:
        return "embedded dataset"
