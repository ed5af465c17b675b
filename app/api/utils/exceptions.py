"""
Custom exception classes for the Crustaceans API.

This module defines all custom exceptions used throughout the application
for consistent error handling and logging.
"""

from typing import Any, Optional
from fastapi import status


class CrustaceanServiceException(Exception):
    """
    Base exception class for all Crustaceans API exceptions.

    Attributes:
        message (str): Error message
        status_code (int): HTTP status code
        error_code (str): Application-specific error code
        details (dict): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize CrustaceanServiceException.

        Args:
            message (str): Error message
            status_code (int): HTTP status code (default: 500)
            error_code (str): Application-specific error code (default: INTERNAL_ERROR)
            details (dict, optional): Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(CrustaceanServiceException):
    """
    Raised when request input is malformed or out of range.

    Carries the itemized messages so the caller sees every violation at once.

    Examples:
        >>> raise ValidationException("Invalid pagination parameters", errors=["Limit must be greater than 0"])
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[list[str]] = None,
        details: Optional[dict] = None,
    ):
        """Initialize ValidationException."""
        self.errors = list(errors or [])
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class InvalidIDException(CrustaceanServiceException):
    """
    Raised when a path identifier is not a valid integer.

    Examples:
        >>> raise InvalidIDException()
    """

    def __init__(self, message: str = "Invalid ID parameter", details: Optional[dict] = None):
        """Initialize InvalidIDException."""
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="INVALID_ID",
            details=details,
        )


class CrustaceanNotFoundException(CrustaceanServiceException):
    """
    Raised when a crustacean is not found in the database.

    Examples:
        >>> raise CrustaceanNotFoundException("Crustacean 42 not found")
    """

    def __init__(self, message: str = "Crustacean not found", details: Optional[dict] = None):
        """Initialize CrustaceanNotFoundException."""
        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="CRUSTACEAN_NOT_FOUND",
            details=details,
        )


class DuplicateNameException(CrustaceanServiceException):
    """
    Raised when a write would leave two crustaceans sharing the same name.

    Raised both by the service pre-check and when the database unique
    constraint rejects a write.

    Examples:
        >>> raise DuplicateNameException()
    """

    def __init__(
        self,
        message: str = "A crustacean with this name already exists",
        details: Optional[dict] = None,
    ):
        """Initialize DuplicateNameException."""
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            error_code="DUPLICATE_NAME",
            details=details,
        )
