"""CreateTicketUseCase: resolve an assignee and open a ticket."""

from __future__ import annotations

import logging

from backoffice.application.ports.ticket_repo import TicketRepository
from backoffice.application.ports.user_repo import UserRepository
from backoffice.domain.entities.ticket import Ticket
from backoffice.domain.errors import ConflictError
from backoffice.domain.policies.assignee_selection import (
    needs_director_fallback,
    select_assignee,
)
from backoffice.domain.policies.assignment_rules import parse_ticket_type, rule_for
from backoffice.domain.value_objects.enums import TicketStatus, TicketType, UserRole

logger = logging.getLogger(__name__)


class CreateTicketUseCase:
    """Creates a ticket for a company and applies its type-specific side effects."""

    def __init__(
        self,
        user_repo: UserRepository,
        ticket_repo: TicketRepository,
    ):
        self._users = user_repo
        self._tickets = ticket_repo

    async def execute(self, ticket_type: TicketType | str, company_id: int) -> Ticket:
        """Create one ticket.

        Pipeline:
        1. Reject unsupported types and a second registrationAddressChange
           ticket for the company
        2. Look up the category/role rule for the type
        3. Resolve the assignee (with director fallback for address changes)
        4. Persist the ticket as open
        5. strikeOff: resolve every other open ticket of the company

        Nothing is written unless all checks pass. The caller owns the commit.
        A company without users, unknown ones included, has no assignee.

        Raises:
            ConflictError: duplicate ticket, or zero/several possible assignees.
            ValidationError: unsupported ticket type.
        """
        ticket_type = parse_ticket_type(ticket_type)

        if ticket_type == TicketType.REGISTRATION_ADDRESS_CHANGE and await self._tickets.exists_for_company(
            company_id, ticket_type
        ):
            logger.warning("Company %s already has a registrationAddressChange ticket", company_id)
            raise ConflictError("Company already has a registrationAddressChange ticket")

        rule = rule_for(ticket_type)

        candidates = await self._users.get_by_role(company_id, rule.role)
        directors = None
        if needs_director_fallback(ticket_type, candidates):
            logger.info("Company %s has no corporate secretary, falling back to director", company_id)
            directors = await self._users.get_by_role(company_id, UserRole.DIRECTOR)

        try:
            assignee = select_assignee(ticket_type, candidates, directors)
        except ConflictError as e:
            logger.warning("Cannot assign %s ticket for company %s: %s", ticket_type.value, company_id, e)
            raise

        ticket = await self._tickets.save(
            Ticket(
                id=None,
                type=ticket_type,
                status=TicketStatus.OPEN,
                category=rule.category,
                company_id=company_id,
                assignee_id=assignee.id,
            )
        )
        logger.info(
            "Ticket %s (%s) for company %s → user %s (%s)",
            ticket.id, ticket_type.value, company_id, assignee.id, assignee.role.value,
        )

        if ticket_type == TicketType.STRIKE_OFF:
            resolved = await self._tickets.resolve_open(company_id, exclude_ticket_id=ticket.id)
            logger.info("Strike-off for company %s resolved %d open tickets", company_id, resolved)

        return ticket
