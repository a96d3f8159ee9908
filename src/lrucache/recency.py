"""Intrusive doubly linked list ordering entries by recency of use.

The head is the most recently used entry and the tail the least recently
used one. The list performs no locking; :class:`lrucache.cache.LRUCache`
serializes every call.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

from lrucache.entry import Entry

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class RecencyList(Generic[K, V]):
    """Doubly linked list of :class:`Entry` objects, most recent first."""

    def __init__(self) -> None:
        self.head: Entry[K, V] | None = None
        self.tail: Entry[K, V] | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Entry[K, V]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __reversed__(self) -> Iterator[Entry[K, V]]:
        node = self.tail
        while node is not None:
            yield node
            node = node.prev

    def push_front(self, entry: Entry[K, V]) -> None:
        """Link a detached entry in as the new head."""
        entry.prev = None
        entry.next = self.head
        if self.head is None:
            self.tail = entry
        else:
            self.head.prev = entry
        self.head = entry
        self._size += 1

    def unlink(self, entry: Entry[K, V]) -> None:
        """Detach ``entry`` and clear both of its links."""
        if entry.prev is not None:
            entry.prev.next = entry.next
        if entry.next is not None:
            entry.next.prev = entry.prev
        if entry is self.head:
            self.head = entry.next
        if entry is self.tail:
            self.tail = entry.prev
        entry.prev = None
        entry.next = None
        self._size -= 1

    def move_to_front(self, entry: Entry[K, V]) -> None:
        """Promote an entry already in the list to head."""
        if entry is self.head:
            return

        prev = entry.prev
        if prev is not None:
            if entry is self.tail:
                self.tail = prev
            prev.next = entry.next
        if entry.next is not None:
            entry.next.prev = prev

        entry.next = self.head
        if self.head is not None:
            self.head.prev = entry
        entry.prev = None
        self.head = entry

    def pop_tail(self) -> Entry[K, V] | None:
        """Detach and return the least recently used entry."""
        entry = self.tail
        if entry is not None:
            self.unlink(entry)
        return entry

    def clear(self) -> int:
        """Detach every entry. Returns how many were dropped."""
        dropped = self._size
        node = self.head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self.head = None
        self.tail = None
        self._size = 0
        return dropped
