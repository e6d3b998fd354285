class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input is invalid (unknown period, bad date, naive instant)."""


class InvalidConfiguration(DomainError):
    """Raised at startup when settings would silently zero out attendance.

    Typical cause: the business-hours rule table misses a weekday.
    """


class DataUnavailable(DomainError):
    """Raised when a data-access collaborator cannot deliver spans or stored rows.

    Never recovered locally: partial results would under-report attendance.
    """
