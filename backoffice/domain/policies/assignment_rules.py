"""AssignmentRules: which category and role a ticket type maps to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

from backoffice.domain.errors import ValidationError
from backoffice.domain.value_objects.enums import TicketCategory, TicketType, UserRole


@dataclass(frozen=True)
class AssignmentRule:
    category: TicketCategory
    role: UserRole


def rule_for(ticket_type: TicketType) -> AssignmentRule:
    """Return the category/role pair for a ticket type.

    The match is exhaustive over ``TicketType``: adding a member without a
    branch here is reported by the type checker at ``assert_never``.
    """
    match ticket_type:
        case TicketType.MANAGEMENT_REPORT:
            return AssignmentRule(TicketCategory.ACCOUNTING, UserRole.ACCOUNTANT)
        case TicketType.REGISTRATION_ADDRESS_CHANGE:
            return AssignmentRule(TicketCategory.CORPORATE, UserRole.CORPORATE_SECRETARY)
        case TicketType.STRIKE_OFF:
            return AssignmentRule(TicketCategory.MANAGEMENT, UserRole.DIRECTOR)
        case _:
            assert_never(ticket_type)


def parse_ticket_type(raw: str | TicketType) -> TicketType:
    """Convert a wire value into a ``TicketType``.

    Raises:
        ValidationError: if the value names no supported ticket type.
    """
    if isinstance(raw, TicketType):
        return raw
    try:
        return TicketType(raw)
    except ValueError:
        raise ValidationError(f"Unsupported ticket type: {raw}") from None
