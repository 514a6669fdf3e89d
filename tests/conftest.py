from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient

load_dotenv(Path(__file__).resolve().parents[1] / ".env.test", override=True)

REFERENCE_DATE = date(2026, 2, 17)


class FakeClock:
    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def data_source():
    from clover_reader.datasource.base import SummaryDataSource

    return AsyncMock(spec=SummaryDataSource)


@pytest.fixture
def cache(clock):
    from clover_reader.summary.cache import SlabCache

    return SlabCache(ttl_seconds=3600, clock=clock)


@pytest.fixture
def service(data_source, cache):
    from clover_reader.services.summary_service import SummaryService

    return SummaryService(data_source, cache, today=lambda: REFERENCE_DATE)


@pytest.fixture
def client(service):
    from clover_reader.dependencies import get_summary_service
    from clover_reader.main import app

    app.dependency_overrides[get_summary_service] = lambda: service

    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
