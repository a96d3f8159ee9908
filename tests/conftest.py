"""Shared test fixtures for lrucache tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pytest

from lrucache.cache import LRUCache
from lrucache.config import CacheSettings, get_settings


@dataclass
class Record:
    """Mutable value used to exercise the merge and clone hooks."""

    x: int
    label: str = ""


def merge_record(existing: Record, incoming: Record) -> bool:
    changed = existing.x != incoming.x or existing.label != incoming.label
    existing.x = incoming.x
    existing.label = incoming.label
    return changed


def clone_record(record: Record) -> Record:
    return Record(x=record.x, label=record.label)


def assert_consistent(cache: LRUCache) -> None:
    """Walk the recency list both ways and compare it with the index."""
    recency = cache._list
    index = cache._index

    forward = []
    node = recency.head
    while node is not None:
        forward.append(node)
        assert len(forward) <= len(index), "forward walk longer than index (cycle?)"
        node = node.next

    backward = []
    node = recency.tail
    while node is not None:
        backward.append(node)
        assert len(backward) <= len(index), "backward walk longer than index (cycle?)"
        node = node.prev

    assert len(forward) == len(index) == len(recency)
    assert backward == list(reversed(forward))
    assert {entry.key for entry in forward} == set(index)
    for entry in forward:
        assert index[entry.key] is entry
    assert len(index) <= cache.capacity

    if not index:
        assert recency.head is None and recency.tail is None
    else:
        assert recency.head.prev is None
        assert recency.tail.next is None
        assert (recency.head is recency.tail) == (len(index) == 1)


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> CacheSettings:
    """Settings independent of the environment."""
    return CacheSettings(default_capacity=1000, minimum_capacity=2)


@pytest.fixture
def make_cache(test_settings: CacheSettings) -> Callable[..., LRUCache]:
    def _make(capacity: int = 10, **kwargs) -> LRUCache:
        return LRUCache(capacity, settings=test_settings, **kwargs)

    return _make


@pytest.fixture
def filled_cache(make_cache) -> LRUCache:
    """Capacity 10 with keys "0".."9" added in order, so "9" is most recent."""
    cache = make_cache(10)
    for i in range(10):
        cache.add_or_update(str(i), str(i))
    return cache


@pytest.fixture
def check_integrity() -> Callable[[LRUCache], None]:
    return assert_consistent


@pytest.fixture
def record_cls() -> type[Record]:
    return Record


@pytest.fixture
def merge_hook() -> Callable[[Record, Record], bool]:
    return merge_record


@pytest.fixture
def clone_hook() -> Callable[[Record], Record]:
    return clone_record
