"""
Typed domain errors for the message board.

Callers catch these instead of driver or ORM exceptions, so the storage
backend can be swapped without changing error handling upstream.
"""


class DomainError(Exception):
    """Base class for all domain-specific errors."""


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


class StorageUnavailable(DomainError):
    """The backend could not be reached, a query failed, or a commit failed."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        message = f"Storage unavailable during {operation}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class ValidationError(DomainError):
    """A message handed to the store is malformed."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
