"""ProcessState: progress of one report scope, held in process memory."""

from __future__ import annotations

from dataclasses import dataclass, replace

from backoffice.domain.value_objects.enums import ProcessStatus


@dataclass
class ProcessState:
    status: ProcessStatus = ProcessStatus.IDLE
    progress: float = 0
    total_files: int | None = None
    processed_files: int | None = None
    duration: float | None = None  # seconds
    error: str | None = None

    def is_processing(self) -> bool:
        return self.status == ProcessStatus.PROCESSING

    def snapshot(self) -> ProcessState:
        return replace(self)

    def to_dict(self) -> dict:
        """API representation; optional fields are left out until they are set."""
        data: dict = {"status": self.status.value, "progress": self.progress}
        if self.total_files is not None:
            data["totalFiles"] = self.total_files
        if self.processed_files is not None:
            data["processedFiles"] = self.processed_files
        if self.duration is not None:
            data["duration"] = self.duration
        if self.error is not None:
            data["error"] = self.error
        return data
