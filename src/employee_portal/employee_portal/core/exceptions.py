class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or the caller is anonymous."""


class AuthorizationError(DomainError):
    """Raised when a caller lacks permission for an action."""


class AccessDenied(AuthorizationError):
    """The caller's role or identity does not allow this operation."""


class NotFound(DomainError):
    """Raised when a referenced record or employee does not exist."""


class AttendanceError(DomainError):
    """Base class for rejected attendance transitions."""


class DuplicateCheckIn(AttendanceError):
    """A second login was attempted on the same day."""


class NoActiveSession(AttendanceError):
    """Logout was attempted without a login record for today."""


class AlreadyCheckedOut(AttendanceError):
    """Logout was attempted after today's record was already closed."""
