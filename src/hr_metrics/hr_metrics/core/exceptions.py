class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class InvalidTransitionError(ValidationError):
    """Raised when an entity cannot move to the requested status."""


class MalformedDurationError(ValidationError):
    """Raised when a working-hours string is not in "{h}h {m}m" form."""
