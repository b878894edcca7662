"""Ticket endpoints: list and create."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.application.use_cases.create_ticket import CreateTicketUseCase
from backoffice.application.use_cases.list_tickets import ListTicketsUseCase
from backoffice.domain.entities.ticket import Ticket
from backoffice.domain.errors import ConflictError, ValidationError
from backoffice.infrastructure.api.dependencies import (
    get_create_ticket_uc,
    get_db_session,
    get_list_tickets_uc,
)

router = APIRouter(prefix="/v1/tickets", tags=["tickets"])


class CreateTicketRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    company_id: int = Field(alias="companyId")


@router.get("")
async def list_tickets(uc: ListTicketsUseCase = Depends(get_list_tickets_uc)):
    """List all tickets with their company and assignee."""
    tickets = await uc.execute()
    return [_serialize_ticket(t, with_relations=True) for t in tickets]


@router.post("", status_code=201)
async def create_ticket(
    body: CreateTicketRequest,
    uc: CreateTicketUseCase = Depends(get_create_ticket_uc),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a ticket and assign it by the rules of its type."""
    try:
        ticket = await uc.execute(body.type, body.company_id)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    await session.commit()
    return _serialize_ticket(ticket)


def _serialize_ticket(t: Ticket, with_relations: bool = False) -> dict:
    """Convert a Ticket to an API response dict."""
    data = {
        "id": t.id,
        "type": t.type.value,
        "companyId": t.company_id,
        "assigneeId": t.assignee_id,
        "status": t.status.value,
        "category": t.category.value,
    }
    if with_relations:
        data["company"] = {"id": t.company.id, "name": t.company.name} if t.company else None
        data["assignee"] = (
            {"id": t.assignee.id, "name": t.assignee.name, "role": t.assignee.role.value}
            if t.assignee
            else None
        )
    return data
