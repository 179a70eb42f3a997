"""An ordered collection with positional insertion and removal."""

from __future__ import annotations

from typing import Any, Iterator


class LinkedList:
    """Sequence of items; out-of-range positions are ignored."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert_at_beginning(self, item: Any) -> None:
        self._items.insert(0, item)

    def insert_at_end(self, item: Any) -> None:
        self._items.append(item)

    def insert_at_position(self, item: Any, position: int) -> None:
        """Insert before the given position; 0..len inclusive is valid."""
        if 0 <= position <= len(self._items):
            self._items.insert(position, item)

    def delete_at_beginning(self) -> Any:
        """Remove and return the first item, or None when empty."""
        return self._items.pop(0) if self._items else None

    def delete_at_end(self) -> Any:
        """Remove and return the last item, or None when empty."""
        return self._items.pop() if self._items else None

    def delete_at_position(self, position: int) -> Any:
        """Remove and return the item at a position, or None if out of range."""
        if 0 <= position < len(self._items):
            return self._items.pop(position)
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)