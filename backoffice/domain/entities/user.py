"""User entity: an employee of a company holding one role."""

from dataclasses import dataclass
from datetime import datetime

from backoffice.domain.value_objects.enums import UserRole


@dataclass
class User:
    id: int | None
    name: str
    role: UserRole
    company_id: int
    created_at: datetime | None = None
