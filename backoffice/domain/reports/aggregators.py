"""Report aggregators: accumulate ledger entries and render report text.

Each aggregator is fed every entry of every input file, in order, and renders
its report once all files are consumed. Aggregators hold no I/O.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import assert_never

from backoffice.domain.errors import MalformedLedgerLineError
from backoffice.domain.reports.ledger import LedgerEntry
from backoffice.domain.value_objects.enums import ReportScope

logger = logging.getLogger(__name__)

CASH_ACCOUNT = "Cash"


def _fmt(value: Decimal) -> str:
    return f"{value:.2f}"


class ReportAggregator(ABC):
    scope: ReportScope
    # Input files skipped so a report never reads its own previous output
    excluded_inputs: frozenset[str] = frozenset()

    def accepts(self, file_name: str) -> bool:
        return file_name.endswith(".csv") and file_name not in self.excluded_inputs

    @abstractmethod
    def consume(self, entry: LedgerEntry) -> None:
        ...

    @abstractmethod
    def render(self) -> str:
        ...


class AccountBalances(ReportAggregator):
    """Balance (debit minus credit) for every account, in first-seen order."""

    scope = ReportScope.ACCOUNTS

    def __init__(self) -> None:
        self.balances: dict[str, Decimal] = {}

    def consume(self, entry: LedgerEntry) -> None:
        self.balances[entry.account] = self.balances.get(entry.account, Decimal(0)) + entry.delta

    def render(self) -> str:
        lines = ["Account,Balance"]
        lines.extend(f"{account},{_fmt(balance)}" for account, balance in self.balances.items())
        return "\n".join(lines)


class YearlyCashBalances(ReportAggregator):
    """Cash movement per financial year."""

    scope = ReportScope.YEARLY
    excluded_inputs = frozenset({ReportScope.YEARLY.output_name})

    def __init__(self) -> None:
        self.by_year: dict[int, Decimal] = {}

    def consume(self, entry: LedgerEntry) -> None:
        if entry.account != CASH_ACCOUNT:
            return
        try:
            year = entry.year()
        except MalformedLedgerLineError as e:
            logger.warning("Skipping Cash line without a year: %s", e)
            return
        self.by_year[year] = self.by_year.get(year, Decimal(0)) + entry.delta

    def render(self) -> str:
        lines = ["Financial Year,Cash Balance"]
        lines.extend(f"{year},{_fmt(self.by_year[year])}" for year in sorted(self.by_year))
        return "\n".join(lines)


INCOME_STATEMENT: dict[str, tuple[str, ...]] = {
    "Revenues": ("Sales Revenue",),
    "Expenses": (
        "Cost of Goods Sold",
        "Salaries Expense",
        "Rent Expense",
        "Utilities Expense",
        "Interest Expense",
        "Tax Expense",
    ),
}

BALANCE_SHEET: dict[str, tuple[str, ...]] = {
    "Assets": (
        "Cash",
        "Accounts Receivable",
        "Inventory",
        "Fixed Assets",
        "Prepaid Expenses",
    ),
    "Liabilities": (
        "Accounts Payable",
        "Loan Payable",
        "Sales Tax Payable",
        "Accrued Liabilities",
        "Unearned Revenue",
        "Dividends Payable",
    ),
    "Equity": ("Common Stock", "Retained Earnings"),
}


class FinancialStatement(ReportAggregator):
    """Basic income statement and balance sheet over a fixed chart of accounts."""

    scope = ReportScope.FS
    excluded_inputs = frozenset({ReportScope.FS.output_name})

    def __init__(self) -> None:
        self.balances: dict[str, Decimal] = {
            account: Decimal(0)
            for section in (INCOME_STATEMENT, BALANCE_SHEET)
            for accounts in section.values()
            for account in accounts
        }

    def consume(self, entry: LedgerEntry) -> None:
        if entry.account in self.balances:
            self.balances[entry.account] += entry.delta

    def _rows(self, accounts: tuple[str, ...], lines: list[str]) -> Decimal:
        total = Decimal(0)
        for account in accounts:
            value = self.balances[account]
            lines.append(f"{account},{_fmt(value)}")
            total += value
        return total

    def render(self) -> str:
        lines = ["Basic Financial Statement", "", "Income Statement"]

        revenue = self._rows(INCOME_STATEMENT["Revenues"], lines)
        expenses = self._rows(INCOME_STATEMENT["Expenses"], lines)
        net_income = revenue - expenses
        lines += [f"Net Income,{_fmt(net_income)}", "", "Balance Sheet"]

        lines.append("Assets")
        assets = self._rows(BALANCE_SHEET["Assets"], lines)
        lines += [f"Total Assets,{_fmt(assets)}", ""]

        lines.append("Liabilities")
        liabilities = self._rows(BALANCE_SHEET["Liabilities"], lines)
        lines += [f"Total Liabilities,{_fmt(liabilities)}", ""]

        lines.append("Equity")
        equity = self._rows(BALANCE_SHEET["Equity"], lines)
        lines.append(f"Retained Earnings (Net Income),{_fmt(net_income)}")
        equity += net_income
        lines += [f"Total Equity,{_fmt(equity)}", ""]

        # Informational: the statement is emitted even when it does not balance
        lines.append(
            f"Assets = Liabilities + Equity, {_fmt(assets)} = {_fmt(liabilities + equity)}"
        )
        return "\n".join(lines)


def aggregator_for(scope: ReportScope) -> ReportAggregator:
    """Fresh aggregator for one run of the given report."""
    match scope:
        case ReportScope.ACCOUNTS:
            return AccountBalances()
        case ReportScope.YEARLY:
            return YearlyCashBalances()
        case ReportScope.FS:
            return FinancialStatement()
        case _:
            assert_never(scope)
