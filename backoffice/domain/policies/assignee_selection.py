"""AssigneeSelectionPolicy: pick the user a new ticket is assigned to."""

from __future__ import annotations

from backoffice.domain.entities.user import User
from backoffice.domain.errors import ConflictError
from backoffice.domain.value_objects.enums import TicketType

NO_ASSIGNEE = "Cannot find an assignee with the required role."
MULTIPLE_SECRETARIES = "Multiple secretaries found."
MULTIPLE_DIRECTORS = "Multiple directors found."


def needs_director_fallback(ticket_type: TicketType, candidates: list[User]) -> bool:
    """Address changes go to the director when the company has no secretary."""
    return ticket_type == TicketType.REGISTRATION_ADDRESS_CHANGE and not candidates


def select_assignee(
    ticket_type: TicketType,
    candidates: list[User],
    directors: list[User] | None = None,
) -> User:
    """Pure function: choose the assignee among users holding the required role.

    Both lists must be ordered most-recently-created first; when several users
    may take the ticket the first one wins.

    Business rules:
      1. registrationAddressChange needs exactly one corporate secretary; with
         none, exactly one director (``directors``) takes it instead.
      2. strikeOff needs exactly one director.
      3. managementReport takes the newest accountant.

    Raises:
        ConflictError: if the rules leave zero or several possible assignees.
    """
    if ticket_type == TicketType.REGISTRATION_ADDRESS_CHANGE:
        if len(candidates) > 1:
            raise ConflictError(MULTIPLE_SECRETARIES)
        if not candidates:
            candidates = directors or []
            if len(candidates) > 1:
                raise ConflictError(MULTIPLE_DIRECTORS)
    elif ticket_type == TicketType.STRIKE_OFF and len(candidates) > 1:
        raise ConflictError(MULTIPLE_DIRECTORS)

    if not candidates:
        raise ConflictError(NO_ASSIGNEE)
    return candidates[0]
