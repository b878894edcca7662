"""Ledger line parsing: positional ``date,account,description,debit,credit``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from backoffice.domain.errors import MalformedLedgerLineError

LEDGER_FIELDS = 5

_YEAR_RE = re.compile(r"^\s*(\d{4})")


@dataclass(frozen=True)
class LedgerEntry:
    date: str
    account: str
    description: str
    debit: Decimal
    credit: Decimal

    @property
    def delta(self) -> Decimal:
        return self.debit - self.credit

    def year(self) -> int:
        """Four-digit year at the start of the date field."""
        match = _YEAR_RE.match(self.date)
        if match is None:
            raise MalformedLedgerLineError(f"Cannot read a year from date {self.date!r}")
        return int(match.group(1))


def parse_amount(value: str | None) -> Decimal:
    """Blank or non-numeric amounts count as zero."""
    if not value or not value.strip():
        return Decimal(0)
    try:
        amount = Decimal(value.strip())
    except InvalidOperation:
        return Decimal(0)
    # NaN / Infinity parse fine but cannot be summed into a report
    return amount if amount.is_finite() else Decimal(0)


def parse_ledger_line(line: str) -> LedgerEntry | None:
    """Split a raw ledger line into a ``LedgerEntry``.

    Returns None for blank lines. Fields past the fifth are ignored.

    Raises:
        MalformedLedgerLineError: if the line has fewer than five fields.
    """
    line = line.rstrip("\r\n")
    if not line.strip():
        return None

    fields = line.split(",")
    if len(fields) < LEDGER_FIELDS:
        raise MalformedLedgerLineError(
            f"Expected {LEDGER_FIELDS} fields, got {len(fields)}: {line!r}"
        )

    date, account, description, debit, credit = fields[:LEDGER_FIELDS]
    return LedgerEntry(
        date=date,
        account=account,
        description=description,
        debit=parse_amount(debit),
        credit=parse_amount(credit),
    )
