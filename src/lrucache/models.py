"""Data models exposed by the cache."""

from __future__ import annotations

from pydantic import BaseModel, computed_field


class CacheStats(BaseModel):
    """Point-in-time counters for one cache instance."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    size: int = 0
    capacity: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0
