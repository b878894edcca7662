"""Seed database with companies and users from CSV files.

Usage:
    python -m backoffice.tools.seed_db
    python -m backoffice.tools.seed_db --data-dir data
    python -m backoffice.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.adapters.csv_loader.loader import load_companies, load_users
from backoffice.adapters.persistence.database import async_session_factory
from backoffice.adapters.persistence.models import CompanyModel, TicketModel, UserModel
from backoffice.adapters.persistence.repositories import (
    SqlCompanyRepository,
    SqlUserRepository,
)
from backoffice.config import settings
from backoffice.domain.entities.company import Company
from backoffice.domain.entities.user import User

logger = logging.getLogger(__name__)


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data in FK order."""
    for model in (TicketModel, UserModel, CompanyModel):
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


def _find_csv(data_dir: Path, name_hints: list[str]) -> Path | None:
    for hint in name_hints:
        for f in sorted(data_dir.glob("*.csv")):
            if hint in f.stem.lower():
                logger.info("Found CSV: %s (matched hint '%s')", f.name, hint)
                return f
    return None


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    counts = {"companies": 0, "users": 0}

    company_csv = _find_csv(data_dir, ["companies", "company"])
    user_csv = _find_csv(data_dir, ["users", "employees", "staff"])
    if not company_csv:
        raise FileNotFoundError(f"No companies CSV found in {data_dir}. Expected companies.csv")

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        companies = SqlCompanyRepository(session)
        users = SqlUserRepository(session)

        company_ids: dict[str, int] = {}
        for cd in load_companies(company_csv):
            existing = await companies.get_by_name(cd["name"])
            if existing:
                logger.debug("Company '%s' already exists, skipping", cd["name"])
                company_ids[cd["name"]] = existing.id
                continue
            company = await companies.save(Company(id=None, name=cd["name"]))
            company_ids[company.name] = company.id
            counts["companies"] += 1
        await session.commit()

        if user_csv:
            for ud in load_users(user_csv):
                company_id = company_ids.get(ud["company"])
                if company_id is None:
                    logger.warning("User '%s': unknown company '%s', skipping", ud["name"], ud["company"])
                    continue
                existing = await session.execute(
                    select(UserModel.id).where(
                        UserModel.company_id == company_id,
                        UserModel.name == ud["name"],
                        UserModel.role == ud["role"].value,
                    )
                )
                if existing.first():
                    logger.debug("User '%s' already exists, skipping", ud["name"])
                    continue
                await users.save(
                    User(id=None, name=ud["name"], role=ud["role"], company_id=company_id)
                )
                counts["users"] += 1
            await session.commit()
        else:
            logger.info("No users CSV found, skipping user import")

    logger.info("Seed complete: %d companies, %d users", counts["companies"], counts["users"])
    return counts


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    parser = argparse.ArgumentParser(description="Seed back-office database from CSV files")
    parser.add_argument(
        "--data-dir", default=settings.seed_data_path, help="Directory with companies.csv / users.csv"
    )
    parser.add_argument("--drop", action="store_true", help="Delete existing data first")
    args = parser.parse_args()

    data_dir = Path(args.data_dir)
    if not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    asyncio.run(seed(data_dir, drop=args.drop))


if __name__ == "__main__":
    main()
