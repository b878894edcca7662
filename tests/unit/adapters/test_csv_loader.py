"""Tests for the CSV seed loader and its normalizers."""

import csv
from pathlib import Path

from backoffice.adapters.csv_loader.loader import load_companies, load_users
from backoffice.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_role,
)
from backoffice.domain.value_objects.enums import UserRole


def _write_csv(rows: list[dict], path: Path, delimiter: str = ",", encoding: str = "utf-8-sig") -> None:
    """Helper to write a test CSV file."""
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


# ─── normalizer ──────────────────────────────────────────────────────


def test_normalize_column_name():
    assert normalize_column_name("\ufeff Company Name ") == "company_name"
    assert normalize_column_name("Role") == "role"


def test_clean_string():
    assert clean_string("  x ") == "x"
    assert clean_string("   ") is None
    assert clean_string(None) is None


def test_parse_role_spellings():
    assert parse_role("accountant") == UserRole.ACCOUNTANT
    assert parse_role("Corporate Secretary") == UserRole.CORPORATE_SECRETARY
    assert parse_role("corporate_secretary") == UserRole.CORPORATE_SECRETARY
    assert parse_role("corporateSecretary") == UserRole.CORPORATE_SECRETARY
    assert parse_role(" DIRECTOR ") == UserRole.DIRECTOR


def test_parse_role_unknown():
    assert parse_role("janitor") is None
    assert parse_role("") is None


# ─── loader ──────────────────────────────────────────────────────────


def test_load_companies(tmp_path):
    csv_path = tmp_path / "companies.csv"
    _write_csv([{"Name": "Acme Ltd"}, {"Name": " "}, {"Name": "Globex"}], csv_path)

    assert load_companies(csv_path) == [{"name": "Acme Ltd"}, {"name": "Globex"}]


def test_load_users_semicolon(tmp_path):
    csv_path = tmp_path / "users.csv"
    _write_csv(
        [
            {"Name": "Ann", "Role": "Accountant", "Company": "Acme Ltd"},
            {"Name": "Bob", "Role": "corporate secretary", "Company": "Acme Ltd"},
        ],
        csv_path,
        delimiter=";",
    )

    users = load_users(csv_path)
    assert users == [
        {"name": "Ann", "role": UserRole.ACCOUNTANT, "company": "Acme Ltd"},
        {"name": "Bob", "role": UserRole.CORPORATE_SECRETARY, "company": "Acme Ltd"},
    ]


def test_load_users_skips_bad_rows(tmp_path):
    csv_path = tmp_path / "users.csv"
    _write_csv(
        [
            {"Name": "Ann", "Role": "janitor", "Company": "Acme Ltd"},
            {"Name": "", "Role": "director", "Company": "Acme Ltd"},
            {"Name": "Dan", "Role": "director", "Company": ""},
            {"Name": "Eve", "Role": "director", "Company": "Acme Ltd"},
        ],
        csv_path,
    )

    assert [u["name"] for u in load_users(csv_path)] == ["Eve"]
