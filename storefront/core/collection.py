"""Entity Collection — in-memory id → record mapping for one entity kind.

Invariants:
    - Every live record is stored under its own id; ids are unique per collection
    - Iteration yields records in creation order
    - get/update/delete on an absent id return None and never raise

Design Decisions:
    - dict over list: O(1) lookup by id, insertion order preserved by the language
    - create() takes a builder receiving the allocated id, so records stay frozen
      and the id is assigned exactly once
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterator, TypeVar

from storefront.core.domain_types import EntityKind
from storefront.core.id_allocator import IdAllocator
from storefront.core.records import Patch, merge

T = TypeVar("T")


@dataclass
class EntityCollection(Generic[T]):
    """One entity kind's records, keyed by id."""

    kind: EntityKind
    ids: IdAllocator = field(default_factory=IdAllocator)
    _records: dict[str, T] = field(default_factory=dict)

    def create(self, build: Callable[[str], T]) -> T:
        """Allocate an id, build the record with it, store and return it."""
        record_id = self.ids.next_id()
        record = build(record_id)
        self._records[record_id] = record
        return record

    def get(self, record_id: str) -> T | None:
        return self._records.get(record_id)

    def update(self, record_id: str, patch: Patch) -> T | None:
        """Merge patch over the stored record. None if the id is absent."""
        current = self._records.get(record_id)
        if current is None:
            return None
        updated = merge(current, patch)
        self._records[record_id] = updated
        return updated

    def replace(self, record: T) -> T:
        """Store a new version of an existing record under its id."""
        self._records[record.id] = record  # type: ignore[attr-defined]
        return record

    def delete(self, record_id: str) -> str | None:
        """Remove the record. Returns the deleted id, or None if absent."""
        if self._records.pop(record_id, None) is None:
            return None
        return record_id

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """First record (in creation order) matching predicate."""
        return next((r for r in self._records.values() if predicate(r)), None)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [r for r in self._records.values() if predicate(r)]

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._records.values()))
