"""Pytest configuration, in-memory fakes of the application ports, shared fixtures."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta

import pytest

from backoffice.application.ports.company_repo import CompanyRepository
from backoffice.application.ports.ledger_storage import LedgerStorage
from backoffice.application.ports.ticket_repo import TicketRepository
from backoffice.application.ports.user_repo import UserRepository
from backoffice.domain.entities.company import Company
from backoffice.domain.entities.ticket import Ticket
from backoffice.domain.entities.user import User
from backoffice.domain.value_objects.enums import TicketStatus


class FakeCompanyRepo(CompanyRepository):
    def __init__(self, companies: list[Company] | None = None):
        self.companies: dict[int, Company] = {c.id: c for c in companies or []}

    async def save(self, company):
        company.id = len(self.companies) + 1
        self.companies[company.id] = company
        return company

    async def get_by_name(self, name):
        return next((c for c in self.companies.values() if c.name == name), None)


class FakeUserRepo(UserRepository):
    def __init__(self, users: list[User] | None = None):
        self.users: dict[int, User] = {u.id: u for u in users or []}

    def add(self, user: User) -> User:
        user.id = len(self.users) + 1
        self.users[user.id] = user
        return user

    async def save(self, user):
        return self.add(user)

    async def get_by_role(self, company_id, role):
        matching = [u for u in self.users.values() if u.company_id == company_id and u.role == role]
        return sorted(matching, key=lambda u: (u.created_at, u.id), reverse=True)


class FakeTicketRepo(TicketRepository):
    def __init__(self, company_repo: FakeCompanyRepo | None = None, user_repo: FakeUserRepo | None = None):
        self.tickets: dict[int, Ticket] = {}
        self._companies = company_repo
        self._users = user_repo

    async def save(self, ticket):
        ticket.id = len(self.tickets) + 1
        self.tickets[ticket.id] = ticket
        return ticket

    async def get_by_id(self, ticket_id):
        return self.tickets.get(ticket_id)

    async def exists_for_company(self, company_id, ticket_type):
        return any(t.company_id == company_id and t.type == ticket_type for t in self.tickets.values())

    async def resolve_open(self, company_id, exclude_ticket_id):
        resolved = 0
        for t in self.tickets.values():
            if t.company_id == company_id and t.is_open() and t.id != exclude_ticket_id:
                t.status = TicketStatus.RESOLVED
                resolved += 1
        return resolved

    async def get_all_with_relations(self):
        tickets = sorted(self.tickets.values(), key=lambda t: t.id)
        for t in tickets:
            if self._companies:
                t.company = self._companies.companies.get(t.company_id)
            if self._users:
                t.assignee = self._users.users.get(t.assignee_id)
        return tickets


class FakeLedgerStorage(LedgerStorage):
    """Ledger files held in memory; counts listings and records writes."""

    def __init__(
        self,
        files: dict[str, list[str]] | None = None,
        list_error: Exception | None = None,
        write_errors: dict[str, Exception] | None = None,
    ):
        self.files = files or {}
        self.list_error = list_error
        self.write_errors = write_errors or {}
        self.list_calls = 0
        self.read_files: list[str] = []
        self.closed_files: list[str] = []
        self.written: dict[str, str] = {}

    async def list_files(self):
        self.list_calls += 1
        await asyncio.sleep(0)
        if self.list_error is not None:
            raise self.list_error
        return list(self.files)

    async def read_lines(self, file_name):
        self.read_files.append(file_name)
        try:
            for line in self.files[file_name]:
                yield line
                await asyncio.sleep(0)
        finally:
            self.closed_files.append(file_name)

    async def write_report(self, file_name, content):
        await asyncio.sleep(0)
        if file_name in self.write_errors:
            raise self.write_errors[file_name]
        self.written[file_name] = content


# ─── Fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def company():
    return Company(id=1, name="Acme Ltd")


@pytest.fixture
def other_company():
    return Company(id=2, name="Globex Ltd")


@pytest.fixture
def clock():
    """Successive creation timestamps, one minute apart."""
    start = datetime(2024, 1, 1, 9, 0)
    ticks = (start + timedelta(minutes=i) for i in range(1_000))
    return lambda: next(ticks)


@pytest.fixture
def company_repo(company, other_company):
    return FakeCompanyRepo([company, other_company])


@pytest.fixture
def user_repo():
    return FakeUserRepo()


@pytest.fixture
def ticket_repo(company_repo, user_repo):
    return FakeTicketRepo(company_repo, user_repo)


@pytest.fixture
def make_storage():
    """Factory for in-memory ledger storage."""
    return FakeLedgerStorage
