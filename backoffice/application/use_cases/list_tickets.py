"""ListTicketsUseCase: every ticket with its company and assignee."""

from __future__ import annotations

from backoffice.application.ports.ticket_repo import TicketRepository
from backoffice.domain.entities.ticket import Ticket


class ListTicketsUseCase:
    def __init__(self, ticket_repo: TicketRepository):
        self._tickets = ticket_repo

    async def execute(self) -> list[Ticket]:
        return await self._tickets.get_all_with_relations()
