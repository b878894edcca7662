"""Port interface for ledger input files and report output files."""

from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator


class LedgerStorage(ABC):
    @abstractmethod
    async def list_files(self) -> list[str]:
        """Names of the files in the ledger input directory, in listing order."""
        ...

    @abstractmethod
    def read_lines(self, file_name: str) -> AsyncGenerator[str, None]:
        """Yield the lines of one input file.

        Implemented as an async generator so callers can ``aclose`` it early.
        """
        ...

    @abstractmethod
    async def write_report(self, file_name: str, content: str) -> None:
        """Write a report to the output directory, replacing any previous content."""
        ...
