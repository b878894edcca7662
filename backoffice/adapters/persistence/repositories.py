"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from backoffice.adapters.persistence.models import CompanyModel, TicketModel, UserModel
from backoffice.application.ports.company_repo import CompanyRepository
from backoffice.application.ports.ticket_repo import TicketRepository
from backoffice.application.ports.user_repo import UserRepository
from backoffice.domain.entities.company import Company
from backoffice.domain.entities.ticket import Ticket
from backoffice.domain.entities.user import User
from backoffice.domain.value_objects.enums import (
    TicketCategory,
    TicketStatus,
    TicketType,
    UserRole,
)

# ─── Mappers ─────────────────────────────────────────────────────────


def _company_to_domain(m: CompanyModel) -> Company:
    return Company(id=m.id, name=m.name, created_at=m.created_at)


def _user_to_domain(m: UserModel) -> User:
    return User(
        id=m.id,
        name=m.name,
        role=UserRole(m.role),
        company_id=m.company_id,
        created_at=m.created_at,
    )


def _ticket_to_domain(m: TicketModel, with_relations: bool = False) -> Ticket:
    ticket = Ticket(
        id=m.id,
        type=TicketType(m.type),
        status=TicketStatus(m.status),
        category=TicketCategory(m.category),
        company_id=m.company_id,
        assignee_id=m.assignee_id,
        created_at=m.created_at,
    )
    if with_relations:
        ticket.company = _company_to_domain(m.company) if m.company else None
        ticket.assignee = _user_to_domain(m.assignee) if m.assignee else None
    return ticket


# ─── Repositories ────────────────────────────────────────────────────


class SqlCompanyRepository(CompanyRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, company: Company) -> Company:
        m = CompanyModel(name=company.name)
        self._s.add(m)
        await self._s.flush()
        company.id = m.id
        return company

    async def get_by_name(self, name: str) -> Company | None:
        result = await self._s.execute(
            select(CompanyModel).where(CompanyModel.name == name).order_by(CompanyModel.id).limit(1)
        )
        m = result.scalar_one_or_none()
        return _company_to_domain(m) if m else None


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, user: User) -> User:
        m = UserModel(name=user.name, role=user.role.value, company_id=user.company_id)
        self._s.add(m)
        await self._s.flush()
        user.id = m.id
        return user

    async def get_by_role(self, company_id: int, role: UserRole) -> list[User]:
        # id breaks ties between rows created within the same timestamp
        result = await self._s.execute(
            select(UserModel)
            .where(UserModel.company_id == company_id, UserModel.role == role.value)
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
        )
        return [_user_to_domain(m) for m in result.scalars()]


class SqlTicketRepository(TicketRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def save(self, ticket: Ticket) -> Ticket:
        m = TicketModel(
            type=ticket.type.value,
            status=ticket.status.value,
            category=ticket.category.value,
            company_id=ticket.company_id,
            assignee_id=ticket.assignee_id,
        )
        self._s.add(m)
        await self._s.flush()
        ticket.id = m.id
        return ticket

    async def get_by_id(self, ticket_id: int) -> Ticket | None:
        m = await self._s.get(TicketModel, ticket_id)
        return _ticket_to_domain(m) if m else None

    async def exists_for_company(self, company_id: int, ticket_type: TicketType) -> bool:
        result = await self._s.execute(
            select(TicketModel.id)
            .where(TicketModel.company_id == company_id, TicketModel.type == ticket_type.value)
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def resolve_open(self, company_id: int, exclude_ticket_id: int) -> int:
        result = await self._s.execute(
            update(TicketModel)
            .where(
                TicketModel.company_id == company_id,
                TicketModel.status == TicketStatus.OPEN.value,
                TicketModel.id != exclude_ticket_id,
            )
            .values(status=TicketStatus.RESOLVED.value)
            .execution_options(synchronize_session=False)
        )
        await self._s.flush()
        return result.rowcount or 0

    async def get_all_with_relations(self) -> list[Ticket]:
        result = await self._s.execute(
            select(TicketModel)
            .options(joinedload(TicketModel.company), joinedload(TicketModel.assignee))
            .order_by(TicketModel.id)
        )
        return [_ticket_to_domain(m, with_relations=True) for m in result.unique().scalars()]
