from __future__ import annotations

import logging
import random
import threading
from typing import Dict, Iterable, Optional

from ..models import Monkey
from .catalog import MonkeyCatalog, name_key

logger = logging.getLogger(__name__)


class AccessCounter:
    """counts how often each monkey came out of a random pick

    keys are case-folded names. one lock guards the table; picking the index
    happens outside it so catalog reads are never serialized.
    """

    def __init__(self, names: Iterable[str] = (), rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._counts: Dict[str, int] = {}
        for name in names:
            key = name_key(name)
            if key is not None:
                self._counts.setdefault(key, 0)

    def pick_random(self, catalog: MonkeyCatalog) -> Optional[Monkey]:
        if catalog.is_empty():
            return None
        selected = catalog[self._rng.randrange(len(catalog))]
        key = name_key(selected.name)
        if key is None:
            # unnamed entries are returned but never counted
            logger.debug("random pick returned an unnamed record; not counted")
            return selected
        with self._lock:
            self._counts[key] = self._counts.get(key, 0) + 1
        logger.debug("random pick: %s", selected.name)
        return selected

    def get_count(self, name: Optional[str]) -> int:
        key = name_key(name)
        if key is None:
            return 0
        with self._lock:
            return self._counts.get(key, 0)

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())
