class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when required input is missing or empty."""


class DuplicateEmailError(DomainError):
    """Raised when registering an email that already exists."""


class NotFoundError(DomainError):
    """Raised when no user matches the given email."""


class InvalidCredentialsError(DomainError):
    """Raised when the PIN does not match the stored hash."""


class NoDataError(DomainError):
    """Raised when there is nothing to export for today."""


class UnsupportedFormatError(DomainError):
    """Raised when an export format other than csv/pdf is requested."""


class InternalError(DomainError):
    """Raised when the store or a renderer fails unexpectedly."""
