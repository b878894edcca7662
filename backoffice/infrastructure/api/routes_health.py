"""Liveness endpoint: database reachability and report runs in flight."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.use_cases.generate_reports import ReportService
from backoffice.infrastructure.api.dependencies import get_db_session, get_report_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    session: AsyncSession = Depends(get_db_session),
    reports: ReportService = Depends(get_report_service),
):
    """Service is degraded, not down, while the database is unreachable.

    Report runs only touch the ledger directories, so they are listed either way.
    """
    try:
        await session.execute(text("SELECT 1"))
        database = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check cannot reach the database: %s", e)
        database = f"error: {e}"

    return {
        "status": "ok" if database == "connected" else "degraded",
        "database": database,
        "reportsProcessing": sorted(
            name for name, state in reports.states().items() if state.is_processing()
        ),
    }
