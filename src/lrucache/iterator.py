"""Forward iterator over the recency list."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Hashable, Iterator, TypeVar

from lrucache.entry import Entry
from lrucache.exceptions import InvalidStateError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IteratorState(str, Enum):
    NOT_STARTED = "not_started"
    POSITIONED = "positioned"
    EXHAUSTED = "exhausted"
    CLOSED = "closed"


class CacheIterator(Generic[K, V]):
    """Walks ``next`` links from a starting entry, most recent first.

    The walk runs over the live list without holding the cache lock. If the
    cache is mutated while iterating, the positions visited are undefined and
    the walk may step onto entries that have since been detached. Use
    :meth:`lrucache.cache.LRUCache.snapshot` when a consistent view is needed.

    Besides the Python iterator protocol the explicit cursor API is exposed:
    :meth:`move_next`, :attr:`current`, :meth:`reset` and :meth:`close`.
    A ``None`` start yields an iterator over nothing.
    """

    def __init__(self, head: Entry[K, V] | None) -> None:
        self._head = head
        self._current: Entry[K, V] | None = None
        self._state = IteratorState.NOT_STARTED

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def current(self) -> tuple[K, V]:
        """The ``(key, value)`` pair under the cursor.

        Raises:
            InvalidStateError: before the first ``move_next``, once exhausted,
                or after ``close``.
        """
        if self._state is IteratorState.CLOSED:
            raise InvalidStateError("iterator has been closed")
        if self._state is not IteratorState.POSITIONED or self._current is None:
            raise InvalidStateError(f"iterator is not positioned on an entry ({self._state.value})")
        return self._current.key, self._current.value

    def move_next(self) -> bool:
        """Advance to the next entry; returns False once the list is exhausted."""
        if self._state is IteratorState.CLOSED:
            raise InvalidStateError("iterator has been closed")
        if self._state is IteratorState.EXHAUSTED:
            return False

        if self._state is IteratorState.NOT_STARTED:
            following = self._head
        else:
            following = self._current.next if self._current is not None else None

        if following is None:
            self._current = None
            self._state = IteratorState.EXHAUSTED
            return False

        self._current = following
        self._state = IteratorState.POSITIONED
        return True

    def reset(self) -> None:
        """Rewind so the next ``move_next`` lands on the starting entry again."""
        if self._state is IteratorState.CLOSED:
            raise InvalidStateError("iterator has been closed")
        self._current = None
        self._state = IteratorState.NOT_STARTED

    def close(self) -> None:
        """Release the starting reference. Idempotent."""
        self._head = None
        self._current = None
        self._state = IteratorState.CLOSED

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return self

    def __next__(self) -> tuple[K, V]:
        if not self.move_next():
            raise StopIteration
        return self.current

    def __enter__(self) -> CacheIterator[K, V]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
