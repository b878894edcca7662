"""Port interface for ticket persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities.ticket import Ticket
from backoffice.domain.value_objects.enums import TicketType


class TicketRepository(ABC):
    @abstractmethod
    async def save(self, ticket: Ticket) -> Ticket:
        ...

    @abstractmethod
    async def get_by_id(self, ticket_id: int) -> Ticket | None:
        ...

    @abstractmethod
    async def exists_for_company(self, company_id: int, ticket_type: TicketType) -> bool:
        """True if the company has any ticket of this type, whatever its status."""
        ...

    @abstractmethod
    async def resolve_open(self, company_id: int, exclude_ticket_id: int) -> int:
        """Mark the company's open tickets resolved, except one. Returns the count."""
        ...

    @abstractmethod
    async def get_all_with_relations(self) -> list[Ticket]:
        """Return every ticket with ``company`` and ``assignee`` attached."""
        ...
