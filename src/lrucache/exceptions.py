"""Exception hierarchy for the cache.

Every error derives from :class:`CacheError` and also from the builtin
exception callers would naturally catch for the same condition.
"""

from __future__ import annotations

from typing import Any


class CacheError(Exception):
    """Base class for cache errors."""


class InvalidArgumentError(CacheError, ValueError):
    """Raised for a missing key, a ``None`` value or an undersized capacity.

    Always raised before the cache is mutated.
    """

    def __init__(self, argument: str, message: str) -> None:
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class CacheKeyNotFoundError(CacheError, KeyError):
    """Raised by ``get``, ``peek`` and ``remove`` when the key is absent."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found in cache: {self.key!r}"


class InvalidStateError(CacheError, RuntimeError):
    """Raised when an iterator is read before positioning or after close."""
