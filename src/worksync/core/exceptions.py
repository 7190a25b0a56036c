class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class AlreadyCheckedIn(ValidationError):
    """An attendance record already exists for the user today."""


class NotCheckedIn(ValidationError):
    """Check-out attempted without a check-in for today."""


class AlreadyCheckedOut(ValidationError):
    """Today's record already has a check-out time."""


class NotFoundError(DomainError):
    """Base for missing-entity errors."""


class UserNotFound(NotFoundError):
    pass


class RecordNotFound(NotFoundError):
    pass


class StorageError(Exception):
    """Raised for any failure reported by the persistence layer."""


class DuplicateRecordError(StorageError):
    """A uniqueness constraint was violated by a write."""
