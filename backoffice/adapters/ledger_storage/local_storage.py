"""Local filesystem ledger storage: implements LedgerStorage."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import AsyncGenerator
from pathlib import Path

from backoffice.application.ports.ledger_storage import LedgerStorage

logger = logging.getLogger(__name__)

# Characters of lines read per worker-thread call
READ_CHUNK_HINT = 64 * 1024


class LocalLedgerStorage(LedgerStorage):
    """Reads ledger files from ``input_dir`` and writes reports into ``output_dir``."""

    def __init__(self, input_dir: Path | str, output_dir: Path | str):
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)

    async def list_files(self) -> list[str]:
        return await asyncio.to_thread(os.listdir, self.input_dir)

    async def read_lines(self, file_name: str) -> AsyncGenerator[str, None]:
        f = await asyncio.to_thread(
            open, self.input_dir / file_name, encoding="utf-8-sig", newline=""
        )
        try:
            while True:
                chunk = await asyncio.to_thread(f.readlines, READ_CHUNK_HINT)
                if not chunk:
                    break
                for line in chunk:
                    yield line
        finally:
            f.close()

    async def write_report(self, file_name: str, content: str) -> None:
        await asyncio.to_thread(self._write, self.output_dir / file_name, content)
        logger.info("Wrote report %s", self.output_dir / file_name)

    @staticmethod
    def _write(path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
