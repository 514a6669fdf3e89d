from clover_reader.clients.api_client import ApiClient
from clover_reader.config import Settings
from clover_reader.datasource.base import SummaryDataSource
from clover_reader.datasource.file_source import FileSummaryDataSource
from clover_reader.datasource.http_source import HttpSummaryDataSource


def build_data_source(cfg: Settings) -> SummaryDataSource:
    kind = cfg.data_source.strip().lower()

    if kind == "file":
        return FileSummaryDataSource(cfg.data_path)

    if kind == "http":
        return HttpSummaryDataSource(
            ApiClient(
                base_url=cfg.api_base_url,
                api_key=cfg.api_key,
                timeout_seconds=cfg.api_timeout_seconds,
            )
        )

    raise ValueError(f"Unsupported data source: {cfg.data_source!r} (expected 'file' or 'http')")
