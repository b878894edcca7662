"""Ticket entity: an administrative task raised for a company."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from backoffice.domain.entities.company import Company
from backoffice.domain.entities.user import User
from backoffice.domain.value_objects.enums import TicketCategory, TicketStatus, TicketType


@dataclass
class Ticket:
    id: int | None
    type: TicketType
    status: TicketStatus
    category: TicketCategory
    company_id: int
    assignee_id: int
    created_at: datetime | None = None

    # Populated only by listing queries
    company: Company | None = None
    assignee: User | None = None

    def is_open(self) -> bool:
        return self.status == TicketStatus.OPEN
