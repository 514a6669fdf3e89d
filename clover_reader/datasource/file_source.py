import asyncio
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from clover_reader.datasource.base import DataSourceError, SummaryDataSource
from clover_reader.observability.logging import log
from clover_reader.schemas import MonthlyEntry, SummaryDocument
from clover_reader.summary.window import derive_window


class FileSummaryDataSource(SummaryDataSource):
    """
    Stands in for the external system by reading a local clover.json export.
    Returns the requested window already normalized against today's date.
    """

    def __init__(self, path: str | Path, today: Optional[Callable[[], date]] = None):
        self._path = Path(path)
        self._today = today or date.today

    @property
    def path(self) -> Path:
        return self._path

    async def fetch(self, months: int) -> list[MonthlyEntry]:
        log().info("external_fetch_started", source="file", months=months, path=str(self._path))

        raw = await asyncio.to_thread(self._read)
        try:
            document = SummaryDocument.model_validate_json(raw)
        except ValidationError as e:
            raise DataSourceError(f"Invalid summary document at {self._path}") from e

        entries = document.data.clover_summary
        return derive_window(entries, months, self._today())

    def _read(self) -> bytes:
        try:
            return self._path.read_bytes()
        except FileNotFoundError as e:
            raise DataSourceError(f"File not found at {self._path}") from e
        except OSError as e:
            raise DataSourceError(f"Failed to read {self._path}") from e
