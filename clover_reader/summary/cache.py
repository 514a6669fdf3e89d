import time
from dataclasses import dataclass
from typing import Callable, Optional

from clover_reader.observability.logging import log
from clover_reader.observability.prometheus import CACHE_EVENTS_TOTAL
from clover_reader.schemas import MonthlyEntry
from clover_reader.summary.slabs import DEFAULT_SLABS, SlabSet

DEFAULT_TTL_SECONDS = 3600.0


@dataclass(frozen=True)
class CacheEntry:
    data: tuple[MonthlyEntry, ...]
    cached_at: float


class SlabCache:
    """
    In-memory store of fetched windows keyed by slab size.

    Entries expire ttl_seconds after insertion; an expired entry reads as a
    miss but is left in place until overwritten or invalidated.
    """

    def __init__(
        self,
        slabs: SlabSet = DEFAULT_SLABS,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")

        self._slabs = slabs
        self._ttl_seconds = float(ttl_seconds)
        self._clock = clock or time.time
        self._store: dict[int, CacheEntry] = {}

    @property
    def slabs(self) -> SlabSet:
        return self._slabs

    def get(self, months: int) -> Optional[list[MonthlyEntry]]:
        entry = self._store.get(months)
        if entry is None:
            return None
        if (self._clock() - entry.cached_at) >= self._ttl_seconds:
            return None
        return list(entry.data)

    def set(self, months: int, data: list[MonthlyEntry]) -> None:
        self._store[months] = CacheEntry(data=tuple(data), cached_at=self._clock())

    def invalidate_smaller_than(self, months: int) -> list[int]:
        removed: list[int] = []
        for slab in self._slabs.smaller_than(months):
            if self._store.pop(slab, None) is not None:
                removed.append(slab)
                CACHE_EVENTS_TOTAL.labels(event="invalidated").inc()
                log().info("cache_invalidated", months=slab, superseded_by=months)
        return removed

    def __contains__(self, months: object) -> bool:
        return months in self._store
