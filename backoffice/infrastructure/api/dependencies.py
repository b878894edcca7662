"""FastAPI dependency injection: wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.adapters.persistence.database import get_session
from backoffice.adapters.persistence.repositories import (
    SqlTicketRepository,
    SqlUserRepository,
)
from backoffice.application.use_cases.create_ticket import CreateTicketUseCase
from backoffice.application.use_cases.generate_reports import ReportService
from backoffice.application.use_cases.list_tickets import ListTicketsUseCase

# Re-export session dependency
get_db_session = get_session


def get_create_ticket_uc(
    session: AsyncSession = Depends(get_session),
) -> CreateTicketUseCase:
    return CreateTicketUseCase(
        user_repo=SqlUserRepository(session),
        ticket_repo=SqlTicketRepository(session),
    )


def get_list_tickets_uc(
    session: AsyncSession = Depends(get_session),
) -> ListTicketsUseCase:
    return ListTicketsUseCase(ticket_repo=SqlTicketRepository(session))


def get_report_service(request: Request) -> ReportService:
    """The process-wide report service created in the app lifespan."""
    return request.app.state.report_service
