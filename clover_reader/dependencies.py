"""Dependency injection utilities for FastAPI."""

from fastapi import Request

from clover_reader.services.summary_service import SummaryService


def get_summary_service(request: Request) -> SummaryService:
    """Get the process-wide SummaryService from app.state."""
    return request.app.state.summary_service
