import asyncio
from typing import Any

import httpx

from clover_reader.config import settings
from clover_reader.datasource.base import DataSourceError


class ApiClientError(DataSourceError):
    pass


class ApiClient:
    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        max_attempts: int = 3,
        backoff_seconds: float = 0.5,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.headers = {"Apikey": settings.api_key if api_key is None else api_key}
        read = settings.api_timeout_seconds if timeout_seconds is None else timeout_seconds
        self._timeout = httpx.Timeout(connect=5.0, read=read, write=read, pool=5.0)
        self._client = httpx.AsyncClient(
            timeout=self._timeout, headers=self.headers, transport=transport
        )
        self._max_attempts = max(int(max_attempts), 1)
        self._backoff_seconds = backoff_seconds

    async def get(self, endpoint: str, params: dict | None = None) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        last_exc: Exception | None = None

        for attempt in range(1, self._max_attempts + 1):
            try:
                resp = await self._client.get(url, params=params)
                if 500 <= resp.status_code <= 599:
                    raise ApiClientError(f"GET {url} -> {resp.status_code}: {resp.text[:200]}")
                resp.raise_for_status()
                data = resp.json()
                if not isinstance(data, dict):
                    raise ApiClientError(f"Unexpected JSON type from GET {url}: {type(data)}")
                return data
            except httpx.HTTPStatusError as e:
                # 4xx will not improve on retry
                raise ApiClientError(f"GET {url} -> {e.response.status_code}") from e
            except (httpx.RequestError, ApiClientError, ValueError) as e:
                last_exc = e
                if attempt < self._max_attempts:
                    await asyncio.sleep(self._backoff_seconds * (2 ** (attempt - 1)))

        raise ApiClientError(f"Failed request after retries: GET {url}") from last_exc

    async def aclose(self) -> None:
        await self._client.aclose()
