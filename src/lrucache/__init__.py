"""Bounded, thread-safe, in-memory LRU cache.

Usage:
    from lrucache import LRUCache

    cache = LRUCache(capacity=100)
    cache.add_or_update("a", 1)
    cache.get("a")
"""

from lrucache.cache import LRUCache
from lrucache.config import CacheSettings, get_settings
from lrucache.exceptions import (
    CacheError,
    CacheKeyNotFoundError,
    InvalidArgumentError,
    InvalidStateError,
)
from lrucache.iterator import CacheIterator, IteratorState
from lrucache.mapping import LRUDict
from lrucache.models import CacheStats
from lrucache.port import CachePort

__all__ = [
    "CacheError",
    "CacheIterator",
    "CacheKeyNotFoundError",
    "CachePort",
    "CacheSettings",
    "CacheStats",
    "InvalidArgumentError",
    "InvalidStateError",
    "IteratorState",
    "LRUCache",
    "LRUDict",
    "get_settings",
]
__version__ = "0.1.0"
