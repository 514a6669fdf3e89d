from pydantic import ValidationError

from clover_reader.clients.api_client import ApiClient
from clover_reader.datasource.base import DataSourceError, SummaryDataSource
from clover_reader.observability.logging import log
from clover_reader.schemas import MonthlyEntry, SummaryDocument

SUMMARY_ENDPOINT = "clover/summary"


class HttpSummaryDataSource(SummaryDataSource):
    """Fetches summaries from the upstream HTTP API; the payload is returned as delivered."""

    def __init__(self, api_client: ApiClient):
        self._api = api_client

    async def fetch(self, months: int) -> list[MonthlyEntry]:
        log().info("external_fetch_started", source="http", months=months)

        payload = await self._api.get(SUMMARY_ENDPOINT, params={"months": months})
        try:
            document = SummaryDocument.model_validate(payload)
        except ValidationError as e:
            raise DataSourceError(f"Invalid summary payload from {SUMMARY_ENDPOINT}") from e

        return list(document.data.clover_summary)

    async def aclose(self) -> None:
        await self._api.aclose()
