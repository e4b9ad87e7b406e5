class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseError(DomainError):
    """Raised when an uploaded workbook cannot be turned into attendance rows."""


class RosterUnavailableError(DomainError):
    """Raised when the active-employee roster cannot be fetched."""
