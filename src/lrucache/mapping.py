"""Dictionary-style view over :class:`~lrucache.cache.LRUCache`."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Generic, Hashable, Iterator, TypeVar

from lrucache.cache import LRUCache

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUDict(MutableMapping, Generic[K, V]):
    """``MutableMapping`` adapter that routes every call through the cache.

    Reading ``d[key]`` promotes the key like :meth:`LRUCache.get`, and
    assigning an existing key follows :meth:`LRUCache.add_or_update`, so the
    stored value is only replaced when the cache has a merge hook.
    """

    def __init__(self, cache: LRUCache[K, V] | None = None, **kwargs) -> None:
        self.cache: LRUCache[K, V] = cache if cache is not None else LRUCache(**kwargs)

    def __getitem__(self, key: K) -> V:
        return self.cache.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.cache.add_or_update(key, value)

    def __delitem__(self, key: K) -> None:
        self.cache.remove(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.cache.keys())

    def __len__(self) -> int:
        return self.cache.count

    def __contains__(self, key: object) -> bool:
        return self.cache.contains(key)  # type: ignore[arg-type]

    def clear(self) -> None:
        self.cache.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.cache.snapshot())!r})"
