"""Tests for LocalLedgerStorage against a temporary directory."""

import pytest

from backoffice.adapters.ledger_storage.local_storage import LocalLedgerStorage
from backoffice.application.use_cases.generate_reports import ReportService
from backoffice.domain.value_objects.enums import ProcessStatus


@pytest.mark.asyncio
async def test_list_and_read(tmp_path):
    (tmp_path / "ledger.csv").write_text("2023-01-01,Cash,x,10,0\n2023-01-02,Cash,y,0,5\n")
    storage = LocalLedgerStorage(tmp_path, tmp_path / "out")

    assert await storage.list_files() == ["ledger.csv"]
    lines = [line async for line in storage.read_lines("ledger.csv")]
    assert [line.rstrip("\n") for line in lines] == ["2023-01-01,Cash,x,10,0", "2023-01-02,Cash,y,0,5"]


@pytest.mark.asyncio
async def test_read_strips_bom(tmp_path):
    (tmp_path / "ledger.csv").write_bytes("\ufeff2023-01-01,Cash,x,10,0".encode("utf-8"))
    storage = LocalLedgerStorage(tmp_path, tmp_path / "out")

    lines = [line async for line in storage.read_lines("ledger.csv")]
    assert lines == ["2023-01-01,Cash,x,10,0"]


@pytest.mark.asyncio
async def test_read_spans_several_chunks(tmp_path):
    rows = [f"2023-01-01,Cash,entry {i},{i},0" for i in range(5000)]
    (tmp_path / "ledger.csv").write_text("\n".join(rows) + "\n")
    storage = LocalLedgerStorage(tmp_path, tmp_path / "out")

    lines = [line.rstrip("\n") async for line in storage.read_lines("ledger.csv")]

    assert lines == rows


@pytest.mark.asyncio
async def test_write_creates_dir_and_overwrites(tmp_path):
    storage = LocalLedgerStorage(tmp_path, tmp_path / "out")

    await storage.write_report("accounts.csv", "old")
    await storage.write_report("accounts.csv", "Account,Balance")

    assert (tmp_path / "out" / "accounts.csv").read_text() == "Account,Balance"


@pytest.mark.asyncio
async def test_missing_input_dir_fails_listing(tmp_path):
    storage = LocalLedgerStorage(tmp_path / "missing", tmp_path / "out")
    with pytest.raises(FileNotFoundError):
        await storage.list_files()


@pytest.mark.asyncio
async def test_reports_end_to_end(tmp_path):
    input_dir = tmp_path / "tmp"
    input_dir.mkdir()
    (input_dir / "jan.csv").write_text("2023-01-05,Cash,sale,250,0\n2023-01-05,Sales Revenue,sale,0,250\n")
    (input_dir / "feb.csv").write_text("2024-02-01,Cash,rent,0,100\n2024-02-01,Rent Expense,rent,100,0\n")
    service = ReportService(LocalLedgerStorage(input_dir, tmp_path / "out"))

    service.start_all()
    await service.drain()

    assert all(s.status == ProcessStatus.COMPLETED for s in service.states().values())
    yearly = (tmp_path / "out" / "yearly.csv").read_text()
    assert yearly == "Financial Year,Cash Balance\n2023,250.00\n2024,-100.00"
    accounts = (tmp_path / "out" / "accounts.csv").read_text().splitlines()
    assert sorted(accounts[1:]) == ["Cash,150.00", "Rent Expense,100.00", "Sales Revenue,-250.00"]
