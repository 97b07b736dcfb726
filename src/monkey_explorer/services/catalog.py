from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from ..models import Monkey


def name_key(name: Optional[str]) -> Optional[str]:
    """case-insensitive lookup key, or none for blank input"""
    if name is None or not isinstance(name, str) or not name.strip():
        return None
    return name.casefold()


class MonkeyCatalog:
    """fixed, ordered set of monkeys; read-only after construction"""

    def __init__(self, monkeys: Iterable[Monkey] = ()):
        self._monkeys: Tuple[Monkey, ...] = tuple(monkeys)

    def __len__(self) -> int:
        return len(self._monkeys)

    def __iter__(self) -> Iterator[Monkey]:
        return iter(self._monkeys)

    def __getitem__(self, index: int) -> Monkey:
        return self._monkeys[index]

    def is_empty(self) -> bool:
        return not self._monkeys

    def list_all(self) -> Tuple[Monkey, ...]:
        return self._monkeys

    def names(self) -> List[str]:
        return [m.name for m in self._monkeys]

    def find_by_name(self, name: Optional[str]) -> Optional[Monkey]:
        key = name_key(name)
        if key is None:
            return None
        # first match in catalog order wins
        for m in self._monkeys:
            if m.name.casefold() == key:
                return m
        return None
