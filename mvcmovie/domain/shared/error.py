"""Error hierarchy for MvcMovie.

Error layers:
- MvcMovieError: Base class for all MvcMovie errors
- DomainError: Business rule violations, validation failures (4xx responses)
- InfrastructureError: System-level failures like storage/network issues (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
Any other MvcMovieError subclass is reported as an internal error (500).
"""

from typing import Any


class MvcMovieError(Exception):
    """Base class for all MvcMovie errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(MvcMovieError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class MissingIdentifierError(DomainError):
    """A required identifier was not supplied with the request."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")


class InvalidMovieError(ValidationError):
    """Submitted movie fields failed validation.

    Carries the per-field messages and the input exactly as submitted so the
    client can redisplay the form.
    """

    def __init__(self, errors: dict[str, str], submitted: dict[str, Any]) -> None:
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid movie fields: {fields}")
        self.errors = errors
        self.submitted = submitted


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class ConcurrencyConflictError(ConflictError):
    """A write affected no rows because the row changed or vanished after it was read."""


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(MvcMovieError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """External service (Wikipedia) is unavailable or returned an unusable answer."""


# =============================================================================
# Internal Errors (500)
# =============================================================================


class InconsistentStateError(MvcMovieError):
    """The store contradicts itself, e.g. an update conflicts on a row that still exists."""
