class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFound(DomainError):
    """Raised when a referenced entity does not exist."""


class DuplicateKeyConflict(DomainError):
    """Raised when a natural key is already taken (users, subjects)."""


class StoreUnavailable(Exception):
    """Raised at startup when the MySQL backend cannot be reached."""
