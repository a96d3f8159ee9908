"""Cache port: Protocol for a bounded key-value cache."""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class CachePort(Protocol):
    """Structural contract embedding services can depend on.

    Note: Uses plain Protocol without generic params to keep structural
    subtyping simple. Concrete types are checked at the call site.
    """

    def add_or_update(self, key: Hashable, value: object) -> None:
        """Store a value, evicting the least recently used entry if full."""
        ...

    def get(self, key: Hashable) -> object:
        """Retrieve a cached value, raising KeyError if absent."""
        ...

    def contains(self, key: Hashable) -> bool:
        ...

    def remove(self, key: Hashable) -> object:
        ...

    def __len__(self) -> int:
        """Return the number of cached entries."""
        ...
