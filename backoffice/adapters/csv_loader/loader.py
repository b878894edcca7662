"""CSV loader: reads the company and user seed files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from backoffice.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_role,
)

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Pick the delimiter (comma/semicolon/tab) used most on the header line."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    counts = {d: first_line.count(d) for d in (",", ";", "\t")}
    best_delim = max(counts, key=counts.get)
    if counts[best_delim] == 0:
        return csv.excel

    class DynamicDialect(csv.excel):
        delimiter = best_delim

    return DynamicDialect


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Returns:
        List of dicts keyed by normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = [
            {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            for raw_row in reader
        ]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def load_companies(file_path: Path) -> list[dict]:
    """Load the companies CSV.

    Expected columns: name (or company).
    """
    companies = []
    for row in _read_csv(file_path):
        name = row.get("name") or row.get("company") or row.get("company_name")
        if not name:
            logger.warning("Skipping company row without a name: %s", row)
            continue
        companies.append({"name": name})
    logger.info("Parsed %d companies", len(companies))
    return companies


def load_users(file_path: Path) -> list[dict]:
    """Load the users CSV.

    Expected columns: name, role, company (company name).
    Rows with a missing name/company or an unknown role are skipped.
    """
    users = []
    for row in _read_csv(file_path):
        name = row.get("name") or row.get("user") or row.get("full_name")
        company = row.get("company") or row.get("company_name")
        role = parse_role(row.get("role"))
        if not name or not company:
            logger.warning("Skipping user row without name or company: %s", row)
            continue
        if role is None:
            logger.warning("Skipping user %s: unknown role %r", name, row.get("role"))
            continue
        users.append({"name": name, "role": role, "company": company})
    logger.info("Parsed %d users", len(users))
    return users
