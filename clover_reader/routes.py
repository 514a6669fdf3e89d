from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from clover_reader.config import settings
from clover_reader.datasource.base import DataSourceError
from clover_reader.dependencies import get_summary_service
from clover_reader.observability.logging import log
from clover_reader.observability.prometheus import prometheus_response
from clover_reader.schemas import HealthCheckResponse, SummaryDocument
from clover_reader.services.summary_service import SummaryService
from clover_reader.summary.slabs import InvalidSlabError

router = APIRouter()


@router.get(
    "/health",
    tags=["healthcheck"],
    summary="Perform a Health Check",
    response_description="Return HTTP Status Code 200 (OK)",
    status_code=status.HTTP_200_OK,
    response_model=HealthCheckResponse,
)
async def get_health() -> HealthCheckResponse:
    return HealthCheckResponse(status="ok", env=settings.env)


@router.get(
    "/summary",
    tags=["summary"],
    summary="Transaction summary for the last N months plus the current month",
    responses={
        404: {"description": "No data returned"},
        422: {"description": "Unsupported slab"},
        502: {"description": "Data source failure"},
    },
)
async def get_summary(
    months: Optional[int] = Query(default=None, description="One of the supported slabs"),
    service: SummaryService = Depends(get_summary_service),
) -> Any:
    months = settings.default_months if months is None else months

    try:
        entries = await service.get_data(months)
    except InvalidSlabError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": "invalid_slab", "supported": list(service.slabs), "reason": str(e)},
        ) from e
    except DataSourceError as e:
        log().exception("summary_fetch_failed", months=months)
        raise HTTPException(
            status_code=502, detail={"message": "data_source_error", "reason": str(e)}
        ) from e

    if not entries:
        raise HTTPException(status_code=404, detail={"message": "no_data"})

    return SummaryDocument.wrap(entries).to_payload()


@router.get("/metrics/prometheus", tags=["monitoring"])
def metrics_prometheus():
    return prometheus_response()
