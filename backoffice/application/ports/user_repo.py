"""Port interface for user persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities.user import User
from backoffice.domain.value_objects.enums import UserRole


class UserRepository(ABC):
    @abstractmethod
    async def save(self, user: User) -> User:
        ...

    @abstractmethod
    async def get_by_role(self, company_id: int, role: UserRole) -> list[User]:
        """Return the company's users holding ``role``, most recently created first."""
        ...
