"""
In-memory fixture tables backing the non-persisting repositories.
"""

from operator import itemgetter
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")

# Identifier reported by every fixture insert; nothing is stored.
FIXTURE_INSERT_ID = 999


class FixtureTable(Generic[T]):
    """Fixed rows, read-only; every read builds fresh entities."""

    def __init__(self, rows: Iterable[Mapping[str, Any]], build: Callable[[dict], T], order_by: str):
        self._rows = tuple(MappingProxyType(dict(row)) for row in rows)
        self._build = build
        self._order_by = order_by

    def all(self) -> List[T]:
        """All rows as new entities, ascending by the natural name field."""
        return [self._build(dict(row)) for row in sorted(self._rows, key=itemgetter(self._order_by))]

    def get(self, id: int) -> Optional[T]:
        for row in self._rows:
            if row["id"] == id:
                return self._build(dict(row))
        return None
