"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Exception handlers in the API layer map them to HTTP status codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ValidationError(DomainError):
    """Input violates one or more validation rules.

    Carries every collected message so the client sees them all at once.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class EmptyPayloadError(DomainError):
    """Request carried no data to act on."""

    def __init__(self, message: str = "No data provided"):
        super().__init__(message)
