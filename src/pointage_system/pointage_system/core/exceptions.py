class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required input is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class AgentNotFoundError(NotFoundError):
    """Raised when no agent resolves from a badge code or id."""


class StorageError(DomainError):
    """Raised when the underlying store fails a read or write.

    Constraint violations (e.g. duplicate badge code) land here too.
    """


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
