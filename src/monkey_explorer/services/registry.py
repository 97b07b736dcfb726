from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from ..models import Monkey
from ..storage import CatalogLoadError, CatalogSource, EmbeddedSource
from .catalog import MonkeyCatalog
from .counter import AccessCounter

logger = logging.getLogger(__name__)


class MonkeyExplorerService:
    """owns the catalog and its access counter; built once per process"""

    def __init__(self, catalog: MonkeyCatalog, rng: Optional[random.Random] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.counter = AccessCounter(catalog.names(), rng=self.rng)

    # reads ------------------------------------------------------------
    def list_all(self) -> Tuple[Monkey, ...]:
        return self.catalog.list_all()

    def find_by_name(self, name: Optional[str]) -> Optional[Monkey]:
        return self.catalog.find_by_name(name)

    # random pick + counting ------------------------------------------
    def pick_random(self) -> Optional[Monkey]:
        return self.counter.pick_random(self.catalog)

    def get_count(self, name: Optional[str]) -> int:
        return self.counter.get_count(name)

    def counts(self) -> List[Tuple[str, int]]:
        # per-record tally in catalog order, blank names skipped
        return [(m.name, self.counter.get_count(m.name)) for m in self.catalog if m.is_named]


def load_catalog(source: CatalogSource) -> MonkeyCatalog:
    """parse every row of the source; any bad row fails the whole load"""
    rows = source.load()
    return MonkeyCatalog(Monkey.from_dict(row) for row in rows)


def build_service(source: Optional[CatalogSource] = None, rng: Optional[random.Random] = None) -> MonkeyExplorerService:
    # a broken dataset degrades to an empty catalog instead of crashing
    source = source or EmbeddedSource()
    try:
        catalog = load_catalog(source)
    except (CatalogLoadError, ValueError) as e:
        logger.warning("failed to load %s, continuing with no data: %s", source.describe(), e)
        catalog = MonkeyCatalog()
    else:
        logger.info("loaded %d monkey(s) from %s", len(catalog), source.describe())
    return MonkeyExplorerService(catalog, rng=rng)
