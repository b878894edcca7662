"""Company entity: owns users and tickets."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Company:
    id: int | None
    name: str
    created_at: datetime | None = None
