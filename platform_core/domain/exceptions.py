"""Domain exceptions for the platform core.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns; callers map
them to user-visible responses using message, error_code, and details.
"""

from typing import Any


class PlatformException(Exception):
    """Base exception for all platform core errors.

    All custom exceptions inherit from this class to allow consistent
    error handling and logging.

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


class ValidationException(PlatformException):
    """Raised when input validation fails (e.g. missing field or too short)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(PlatformException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user').
            resource_id: The id, username or key that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserActivationException(PlatformException):
    """Raised when an account cannot be activated (unknown or already used hash key)."""

    def __init__(
        self, message: str = "Cannot activate user because a hash key is wrong."
    ) -> None:
        super().__init__(message, "USER_ACTIVATION_ERROR")


class PasswordGeneratorConfigurationException(PlatformException):
    """Raised when password generation constraints cannot be satisfied.

    This is a programming or deployment error (fixed policy), not a user error;
    callers log it and abort instead of retrying.
    """

    def __init__(self, message: str, **details: Any) -> None:
        """Initialize with message and the offending parameters.

        Args:
            message: Description of the infeasible configuration.
            **details: Parameters that were requested (length, min_upper, ...).
        """
        super().__init__(message, "CONFIGURATION_ERROR", details)


class UserAlreadyExistsException(PlatformException):
    """Raised when saving a user whose username or hash key already exists."""

    def __init__(self) -> None:
        super().__init__(
            "Username or activation key already registered",
            "USER_ALREADY_EXISTS",
            {},
        )


class SqlNotConfiguredException(PlatformException):
    """Raised when an operation requires SQL but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
