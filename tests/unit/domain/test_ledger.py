"""Tests for ledger line parsing."""

from decimal import Decimal

import pytest

from backoffice.domain.errors import MalformedLedgerLineError
from backoffice.domain.reports.ledger import parse_amount, parse_ledger_line


def test_parse_full_line():
    entry = parse_ledger_line("2023-04-01,Cash,opening balance,100.50,0\n")
    assert entry.date == "2023-04-01"
    assert entry.account == "Cash"
    assert entry.description == "opening balance"
    assert entry.debit == Decimal("100.50")
    assert entry.credit == Decimal("0")
    assert entry.delta == Decimal("100.50")


def test_parse_line_with_crlf():
    entry = parse_ledger_line("2023-04-01,Cash,x,0,25\r\n")
    assert entry.credit == Decimal("25")
    assert entry.delta == Decimal("-25")


def test_blank_line_is_skipped():
    assert parse_ledger_line("\n") is None
    assert parse_ledger_line("   ") is None


def test_extra_fields_are_ignored():
    entry = parse_ledger_line("2023-04-01,Cash,x,10,0,extra,fields")
    assert entry.delta == Decimal("10")


def test_too_few_fields_is_malformed():
    with pytest.raises(MalformedLedgerLineError, match="Expected 5 fields, got 3"):
        parse_ledger_line("invalid,csv,format")


def test_header_line_counts_as_zero_amounts():
    entry = parse_ledger_line("date,account,description,debit,credit")
    assert entry.account == "account"
    assert entry.delta == Decimal(0)


@pytest.mark.parametrize("raw", ["", "  ", None, "abc", "NaN", "Infinity"])
def test_unusable_amounts_are_zero(raw):
    assert parse_amount(raw) == Decimal(0)


def test_amount_with_surrounding_spaces():
    assert parse_amount(" 12.30 ") == Decimal("12.30")


def test_year_from_date():
    assert parse_ledger_line("2021-12-31,Cash,x,1,0").year() == 2021
    assert parse_ledger_line("2021/12/31 10:00,Cash,x,1,0").year() == 2021


def test_year_from_unreadable_date():
    entry = parse_ledger_line("31.12.21,Cash,x,1,0")
    with pytest.raises(MalformedLedgerLineError):
        entry.year()
