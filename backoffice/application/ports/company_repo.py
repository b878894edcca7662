"""Port interface for company persistence."""

from abc import ABC, abstractmethod

from backoffice.domain.entities.company import Company


class CompanyRepository(ABC):
    @abstractmethod
    async def save(self, company: Company) -> Company:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Company | None:
        ...
