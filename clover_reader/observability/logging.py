import logging
import sys

import structlog
from structlog.contextvars import merge_contextvars

from clover_reader.config import settings


def configure_logging(level: str | None = None, json_logs: bool = True) -> None:
    """
    Route structlog through stdlib logging on stderr.

    The HTTP service keeps JSON lines; the CLI passes json_logs=False so
    cache/fetch events read as plain text next to the table on stdout.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=str(level or settings.log_level).upper(),
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def log():
    return structlog.get_logger()
