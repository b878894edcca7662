"""Report endpoints: trigger ledger report runs and poll their progress."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from backoffice.application.use_cases.generate_reports import ReportService
from backoffice.domain.value_objects.enums import ReportScope
from backoffice.infrastructure.api.dependencies import get_report_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/reports", tags=["reports"])


@router.get("")
async def report_states(service: ReportService = Depends(get_report_service)):
    """Progress of every report, keyed by output file name."""
    return {name: state.to_dict() for name, state in service.states().items()}


@router.get("/{scope}")
async def report_state(scope: str, service: ReportService = Depends(get_report_service)):
    """Progress of a single report."""
    try:
        report_scope = ReportScope(scope)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown report: {scope}")
    return service.state(report_scope).to_dict()


@router.post("", status_code=201)
async def generate_reports(service: ReportService = Depends(get_report_service)):
    """Start every report run that is not already in flight.

    Returns as soon as the runs are started; poll GET for their outcome.
    """
    started = service.start_all()
    logger.info(
        "Report runs requested: %s",
        ", ".join(f"{name}={state.status.value}" for name, state in started.items()),
    )
    return {"message": "finished"}
