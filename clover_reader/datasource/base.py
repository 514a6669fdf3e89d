from abc import ABC, abstractmethod

from clover_reader.schemas import MonthlyEntry


class DataSourceError(RuntimeError):
    pass


class SummaryDataSource(ABC):
    @abstractmethod
    async def fetch(self, months: int) -> list[MonthlyEntry]:
        """Fetch the latest `months` months of summary data from the external system."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release connections held by the data source."""
        return None
