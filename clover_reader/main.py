from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clover_reader.config import settings
from clover_reader.datasource.factory import build_data_source
from clover_reader.observability.logging import configure_logging, log
from clover_reader.observability.middleware import RequestContextMiddleware
from clover_reader.routes import router
from clover_reader.services.summary_service import SummaryService
from clover_reader.summary.cache import SlabCache
from clover_reader.summary.slabs import SlabSet

configure_logging()
log().info("logging_configured", env=settings.env)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and cleanup application resources."""
    log().info("initializing_resources", data_source=settings.data_source)
    data_source = build_data_source(settings)
    cache = SlabCache(
        slabs=SlabSet.of(settings.slabs),
        ttl_seconds=settings.cache_ttl_seconds,
    )
    app.state.summary_service = SummaryService(data_source, cache)
    log().info("resources_initialized", slabs=list(cache.slabs))

    yield

    log().info("shutting_down")
    await data_source.aclose()


def create_app() -> FastAPI:
    api = FastAPI(
        title="Clover Transaction Summary",
        version="1.0.0",
        lifespan=lifespan,
    )

    api.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    api.add_middleware(RequestContextMiddleware)
    api.include_router(router)

    return api


app = create_app()
