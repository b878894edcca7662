"""Tests for domain enums."""

from backoffice.domain.value_objects.enums import (
    ProcessStatus,
    ReportScope,
    TicketCategory,
    TicketStatus,
    TicketType,
    UserRole,
)


def test_ticket_type_values():
    assert TicketType.MANAGEMENT_REPORT.value == "managementReport"
    assert TicketType.REGISTRATION_ADDRESS_CHANGE.value == "registrationAddressChange"
    assert TicketType.STRIKE_OFF.value == "strikeOff"


def test_ticket_status_values():
    assert {s.value for s in TicketStatus} == {"open", "resolved"}


def test_ticket_category_values():
    assert {c.value for c in TicketCategory} == {"accounting", "corporate", "management"}


def test_user_role_values():
    assert UserRole.CORPORATE_SECRETARY.value == "corporateSecretary"
    assert len(UserRole) == 3


def test_report_scope_output_names():
    assert [s.output_name for s in ReportScope] == ["accounts.csv", "yearly.csv", "fs.csv"]


def test_process_status_values():
    assert [s.value for s in ProcessStatus] == ["idle", "processing", "completed", "error"]
