"""Thread-safe bounded LRU cache.

A dict index maps each key to its :class:`~lrucache.entry.Entry`, and the
same entries are threaded on a :class:`~lrucache.recency.RecencyList` from
most to least recently used. One lock guards both structures, so no caller
ever sees an index and list that disagree.
"""

from __future__ import annotations

from threading import RLock
from typing import Callable, Generic, Hashable, Iterator, TypeVar

import structlog

from lrucache.config import CacheSettings, get_settings
from lrucache.entry import Entry, validate_key, validate_value
from lrucache.exceptions import CacheKeyNotFoundError, InvalidArgumentError
from lrucache.iterator import CacheIterator
from lrucache.models import CacheStats
from lrucache.recency import RecencyList

logger = structlog.get_logger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

MergeHook = Callable[[V, V], bool]
CloneHook = Callable[[V], V]


class LRUCache(Generic[K, V]):
    """Bounded key/value store evicting the least recently used entry.

    ``add_or_update``, ``get`` and ``refresh`` promote the touched key to the
    front; ``peek`` and ``contains`` never change the order.

    Args:
        capacity: Maximum number of entries. Defaults to
            ``settings.default_capacity``.
        merge: Called as ``merge(existing, incoming)`` when an existing key is
            re-added. It updates ``existing`` in place and returns whether
            anything changed. Without it the incoming value is dropped.
        clone: Called on the incoming value of a new key; its result is what
            gets stored.
        settings: Overrides the process-wide :func:`get_settings`.

    Hooks run while the lock is held. The lock is re-entrant, so a hook may
    read the cache, but it must not add or remove entries.

    Raises:
        InvalidArgumentError: ``capacity`` is below ``settings.minimum_capacity``.
    """

    def __init__(
        self,
        capacity: int | None = None,
        *,
        merge: MergeHook | None = None,
        clone: CloneHook | None = None,
        settings: CacheSettings | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        if capacity is None:
            capacity = settings.default_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgumentError("capacity", f"expected an int, got {type(capacity).__name__}")
        if capacity < settings.minimum_capacity:
            raise InvalidArgumentError(
                "capacity", f"cache size must be at least {settings.minimum_capacity}, got {capacity}"
            )

        self._capacity = capacity
        self._index: dict[K, Entry[K, V]] = {}
        self._list: RecencyList[K, V] = RecencyList()
        self._lock = RLock()
        self._merge = merge
        self._clone = clone

        self._hits = 0
        self._misses = 0
        self._evictions = 0

        logger.debug("cache_created", capacity=capacity)

    def set_merge_hook(self, merge: MergeHook | None) -> None:
        """Install the duplicate-insert hook. Not safe during in-flight operations."""
        self._merge = merge

    def set_clone_hook(self, clone: CloneHook | None) -> None:
        """Install the insert-copy hook. Not safe during in-flight operations."""
        self._clone = clone

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._index)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, count={self.count})"

    def add_or_update(self, key: K, value: V) -> None:
        """Insert ``value`` under ``key`` or refresh an existing entry.

        An existing key is moved to the front and, if a merge hook is set,
        merged with ``value``. A new key is stored at the front, evicting the
        least recently used entry when the cache is full.

        Raises:
            InvalidArgumentError: ``key`` is None or empty, or ``value`` is None.
        """
        validate_key(key)
        validate_value(value)

        evicted: Entry[K, V] | None = None
        changed: bool | None = None
        with self._lock:
            entry = self._index.get(key)
            if entry is not None:
                if self._merge is not None:
                    changed = bool(self._merge(entry.value, value))
                self._list.move_to_front(entry)
            else:
                stored = self._clone(value) if self._clone is not None else value
                entry = Entry(key, stored)
                self._index[key] = entry
                self._list.push_front(entry)

                if len(self._index) > self._capacity:
                    evicted = self._evict_tail()

        if changed is not None:
            logger.debug("cache_merged", key=key, changed=changed)
        if evicted is not None:
            logger.debug("cache_evicted", key=evicted.key, capacity=self._capacity)

    def get(self, key: K) -> V:
        """Return the value for ``key`` and mark it most recently used.

        Raises:
            InvalidArgumentError: ``key`` is None or empty.
            CacheKeyNotFoundError: ``key`` is not cached.
        """
        validate_key(key)
        with self._lock:
            entry = self._lookup(key)
            self._list.move_to_front(entry)
            return entry.value

    def peek(self, key: K) -> V:
        """Return the value for ``key`` without changing its position.

        Raises:
            InvalidArgumentError: ``key`` is None or empty.
            CacheKeyNotFoundError: ``key`` is not cached.
        """
        validate_key(key)
        with self._lock:
            return self._lookup(key).value

    def contains(self, key: K) -> bool:
        validate_key(key)
        with self._lock:
            return key in self._index

    def refresh(self, key: K) -> bool:
        """Move ``key`` to the front if cached; returns whether it was."""
        validate_key(key)
        with self._lock:
            entry = self._index.get(key)
            if entry is None:
                return False
            self._list.move_to_front(entry)
            return True

    def remove(self, key: K) -> V:
        """Drop ``key`` from the cache and return its value.

        Raises:
            InvalidArgumentError: ``key`` is None or empty.
            CacheKeyNotFoundError: ``key`` is not cached.
        """
        validate_key(key)
        with self._lock:
            entry = self._index.pop(key, None)
            if entry is None:
                raise CacheKeyNotFoundError(key)
            self._list.unlink(entry)
            return entry.value

    def clear(self) -> None:
        with self._lock:
            self._index.clear()
            dropped = self._list.clear()
        logger.debug("cache_cleared", dropped=dropped)

    def enumerate(self) -> CacheIterator[K, V]:
        """Live iterator over ``(key, value)`` pairs, most recent first.

        Only the starting entry is read under the lock. Mutating the cache
        while the iterator is in use gives undefined positions; prefer
        :meth:`snapshot` when other threads may write.
        """
        with self._lock:
            return CacheIterator(self._list.head)

    def snapshot(self) -> list[tuple[K, V]]:
        """Copy of ``(key, value)`` pairs taken under the lock, most recent first."""
        with self._lock:
            return [(entry.key, entry.value) for entry in self._list]

    def keys(self) -> list[K]:
        return [key for key, _ in self.snapshot()]

    def values(self) -> list[V]:
        return [value for _, value in self.snapshot()]

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._index),
                capacity=self._capacity,
            )

    def reset_stats(self) -> None:
        with self._lock:
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def _lookup(self, key: K) -> Entry[K, V]:
        """Find ``key`` and record a hit or miss. Caller holds the lock."""
        entry = self._index.get(key)
        if entry is None:
            self._misses += 1
            raise CacheKeyNotFoundError(key)
        self._hits += 1
        return entry

    def _evict_tail(self) -> Entry[K, V] | None:
        """Drop the least recently used entry. Caller holds the lock."""
        entry = self._list.pop_tail()
        if entry is not None:
            del self._index[entry.key]
            self._evictions += 1
        return entry
