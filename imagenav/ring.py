"""Circular, order-preserving collection of entries with a single cursor."""

from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .errors import EmptyCollection
from .types import Entry


class NavigationRing:
    """Owned list of entries plus an integer cursor.

    Entries keep their insertion order; removal compacts the list without
    reordering. The cursor is a valid index whenever the ring is non-empty
    and 0 otherwise.
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: List[Entry] = list(entries)
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"NavigationRing(len={len(self._entries)}, cursor={self._cursor})"

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def current(self) -> Entry:
        """Entry under the cursor."""
        self._require_entries()
        return self._entries[self._cursor]

    def index_of(self, step: int) -> int:
        """Index `step` positions away from the cursor, wrapping both ways."""
        self._require_entries()
        return (self._cursor + step) % len(self._entries)

    def peek(self, step: int = 1) -> Tuple[int, Entry]:
        """Return (index, entry) `step` positions away without moving."""
        idx = self.index_of(step)
        return idx, self._entries[idx]

    def advance(self) -> Entry:
        """Move forward one position (last wraps to first)."""
        self._cursor = self.index_of(1)
        return self._entries[self._cursor]

    def retreat(self) -> Entry:
        """Move backward one position (first wraps to last)."""
        self._cursor = self.index_of(-1)
        return self._entries[self._cursor]

    def seek(self, index: int) -> Entry:
        """Place the cursor on `index`."""
        self._require_entries()
        if not 0 <= index < len(self._entries):
            raise IndexError(f"ring index out of range: {index}")
        self._cursor = index
        return self._entries[index]

    def remove_current(self) -> Entry:
        """Delete the entry under the cursor.

        The cursor then refers to the entry that followed the removed one,
        or wraps to 0 when the removed entry was last.
        """
        self._require_entries()
        return self.remove_at(self._cursor)

    def remove_at(self, index: int) -> Entry:
        """Delete the entry at `index`, keeping the cursor on its entry."""
        self._require_entries()
        if not 0 <= index < len(self._entries):
            raise IndexError(f"ring index out of range: {index}")
        removed = self._entries.pop(index)
        if index < self._cursor:
            self._cursor -= 1
        if self._cursor >= len(self._entries):
            self._cursor = 0
        return removed

    def _require_entries(self) -> None:
        if not self._entries:
            raise EmptyCollection()
