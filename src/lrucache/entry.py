"""Recency list node."""

from __future__ import annotations

from typing import Any, Generic, Hashable, TypeVar

from lrucache.exceptions import InvalidArgumentError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def validate_key(key: Any) -> None:
    """Reject ``None`` and empty-string keys."""
    if key is None:
        raise InvalidArgumentError("key", "key cannot be None")
    if isinstance(key, str) and not key:
        raise InvalidArgumentError("key", "key cannot be empty")


def validate_value(value: Any) -> None:
    if value is None:
        raise InvalidArgumentError("value", "value cannot be None")


class Entry(Generic[K, V]):
    """A cached key/value pair and its links in the recency list."""

    __slots__ = ("_key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        validate_key(key)
        validate_value(value)
        self._key = key
        self.value = value
        self.prev: Entry[K, V] | None = None
        self.next: Entry[K, V] | None = None

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return (
            f"Key:{self._key} Data:{self.value} "
            f"Previous:{_summary(self.prev)} Next:{_summary(self.next)}"
        )


def _summary(entry: Entry[Any, Any] | None) -> str:
    return "Set" if entry is not None else "Null"
