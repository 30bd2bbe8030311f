"""Domain exceptions for the back office.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

from backoffice.core.constants import GENERIC_LOGIN_ERROR


class BackofficeException(Exception):
    """Base exception for all back-office errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(BackofficeException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(BackofficeException):
    """Raised when authentication fails.

    The default message is the same for every cause so callers cannot tell an
    unknown email from a wrong password.
    """

    def __init__(self, message: str = GENERIC_LOGIN_ERROR) -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class UsernameNotFoundException(BackofficeException):
    """Raised by the user provider when no employee matches the username."""

    def __init__(self, username: str) -> None:
        """Initialize with the username that could not be resolved.

        Args:
            username: The submitted username (employee email).
        """
        super().__init__(
            f'Username "{username}" does not exist.',
            "USERNAME_NOT_FOUND",
            {"username": username},
        )


class UnsupportedPrincipalException(BackofficeException):
    """Raised when a provider is asked to refresh a principal it did not create."""

    def __init__(self, principal_type: str) -> None:
        super().__init__(
            f'Instances of "{principal_type}" are not supported.',
            "UNSUPPORTED_PRINCIPAL",
            {"principal_type": principal_type},
        )


class SqlNotConfiguredException(BackofficeException):
    """Raised when an operation requires the database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
