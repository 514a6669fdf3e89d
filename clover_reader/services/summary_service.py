import time
from datetime import date
from typing import Callable, Optional

from clover_reader.datasource.base import SummaryDataSource
from clover_reader.observability.logging import log
from clover_reader.observability.prometheus import CACHE_EVENTS_TOTAL, FETCH_DURATION_SECONDS
from clover_reader.schemas import MonthlyEntry
from clover_reader.summary.cache import SlabCache
from clover_reader.summary.window import derive_window


class SummaryService:
    """
    Serves "last N months" windows while keeping calls to the data source down.

    Order of resolution for a request:
    1. fresh cache entry for exactly N, returned as stored;
    2. smallest fresh larger slab, narrowed to N via derive_window;
    3. fetch N from the data source, cache it as returned and drop every
       cached slab smaller than N.
    """

    def __init__(
        self,
        data_source: SummaryDataSource,
        cache: SlabCache,
        today: Optional[Callable[[], date]] = None,
    ):
        self._data_source = data_source
        self._cache = cache
        self._today = today or date.today

    @property
    def slabs(self):
        return self._cache.slabs

    async def get_data(self, months: int) -> list[MonthlyEntry]:
        self.slabs.validate(months)

        cached = self._cache.get(months)
        if cached is not None:
            CACHE_EVENTS_TOTAL.labels(event="hit").inc()
            log().info("cache_hit", months=months)
            return cached

        for larger in self.slabs.larger_than(months):
            superset = self._cache.get(larger)
            if superset is None:
                continue

            CACHE_EVENTS_TOTAL.labels(event="derived").inc()
            log().info("cache_derived", months=months, source_months=larger)
            return derive_window(superset, months, self._today())

        CACHE_EVENTS_TOTAL.labels(event="miss").inc()
        started = time.perf_counter()
        try:
            fresh = await self._data_source.fetch(months)
        finally:
            FETCH_DURATION_SECONDS.labels(months=str(months)).observe(
                time.perf_counter() - started
            )
        log().info("external_fetch_completed", months=months, entries=len(fresh))

        self._cache.set(months, fresh)
        self._cache.invalidate_smaller_than(months)
        return fresh
