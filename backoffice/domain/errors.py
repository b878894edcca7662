"""Domain exceptions raised by use cases and report aggregators."""


class BackofficeError(Exception):
    """Base exception for back-office operations."""


class ConflictError(BackofficeError):
    """A business rule prevents the operation (duplicate, ambiguous or missing assignee)."""


class ValidationError(BackofficeError):
    """The request carries a value the domain does not accept."""


class MalformedLedgerLineError(BackofficeError):
    """A ledger line cannot be split into its positional fields."""
