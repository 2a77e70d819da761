"""Identifier Allocator — monotonic per-collection id counter.

Invariants:
    - Ids are decimal strings "1", "2", ... in allocation order
    - The counter is never decremented: a deleted id is never issued again

Design Decisions:
    - Counter, not collection size: size-based allocation reissues ids after a
      delete, which lets a stale client reference silently hit a new record
"""

from dataclasses import dataclass


@dataclass
class IdAllocator:
    """Issues the next id for one collection."""

    issued: int = 0

    def next_id(self) -> str:
        self.issued += 1
        return str(self.issued)

    def peek(self) -> str:
        """The id the next call to next_id() will return, without consuming it."""
        return str(self.issued + 1)
