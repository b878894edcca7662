"""Domain enums: pure Python, no external dependencies."""

from enum import Enum


class TicketType(str, Enum):
    MANAGEMENT_REPORT = "managementReport"
    REGISTRATION_ADDRESS_CHANGE = "registrationAddressChange"
    STRIKE_OFF = "strikeOff"


class TicketStatus(str, Enum):
    OPEN = "open"
    RESOLVED = "resolved"


class TicketCategory(str, Enum):
    ACCOUNTING = "accounting"
    CORPORATE = "corporate"
    MANAGEMENT = "management"


class UserRole(str, Enum):
    ACCOUNTANT = "accountant"
    CORPORATE_SECRETARY = "corporateSecretary"
    DIRECTOR = "director"


class ReportScope(str, Enum):
    ACCOUNTS = "accounts"
    YEARLY = "yearly"
    FS = "fs"

    @property
    def output_name(self) -> str:
        return f"{self.value}.csv"


class ProcessStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"
