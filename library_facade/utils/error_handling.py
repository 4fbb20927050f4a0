"""
Error handling utilities for the library facade.

This module defines the application error hierarchy and helpers for
executing calls whose failures should be logged rather than propagated.
Every library error carries a fixed, user-visible message; ``str(error)``
always returns that message unchanged.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeVar

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels attached to application errors."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AppError(Exception):
    """Base class for all application errors."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        error_code: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the error.

        Args:
            message: Human readable error message
            severity: How serious the error is
            error_code: Machine readable error identifier
            cause: The exception that triggered this error, if any
            details: Additional context for logging
        """
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.error_code = error_code
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary for structured logging."""
        result = {
            "error_type": type(self).__name__,
            "message": self.message,
            "severity": self.severity.value,
            "error_code": self.error_code,
        }
        if self.cause is not None:
            result["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        if self.details:
            result["details"] = self.details
        return result


class LibraryError(AppError):
    """Base class for errors raised by the library domain."""

    default_message = "Library operation failed."
    default_severity = ErrorSeverity.WARNING
    default_code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message or self.default_message,
            severity=self.default_severity,
            error_code=self.default_code,
            cause=cause,
            details=details,
        )


class InvalidArgumentError(LibraryError, ValueError):
    """Malformed or missing input supplied by the caller."""

    default_message = "Invalid argument."
    default_code = "invalid_argument"


class IllegalStateError(LibraryError):
    """An entity transition was requested from the wrong state."""

    default_message = "Illegal state."
    default_severity = ErrorSeverity.ERROR
    default_code = "illegal_state"


class BookNotFoundError(LibraryError):
    default_message = "Book not found!"
    default_code = "book_not_found"


class UserNotRegisteredError(LibraryError):
    default_message = "User not found!"
    default_code = "user_not_registered"


class BookAlreadyBorrowedError(LibraryError):
    default_message = "Book is already borrowed!"
    default_code = "book_already_borrowed"


class BookNotBorrowedError(LibraryError):
    default_message = "Book wasn't borrowed!"
    default_code = "book_not_borrowed"


class ReviewServiceUnavailableError(LibraryError):
    """The review service could not produce reviews."""

    default_message = "Review service unavailable!"
    default_severity = ErrorSeverity.ERROR
    default_code = "review_service_unavailable"


class NoReviewsFoundError(LibraryError):
    """The review service answered, but had nothing for the book."""

    default_message = "No reviews found!"
    default_severity = ErrorSeverity.INFO
    default_code = "no_reviews_found"


class NotificationFailedError(LibraryError):
    """A notification channel failed to deliver a message."""

    default_message = "Notification failed!"
    default_severity = ErrorSeverity.ERROR
    default_code = "notification_failed"


def safe_execute(
    func: Callable[..., T],
    *args: Any,
    default: Optional[T] = None,
    error_message: str = "Operation failed",
    expected: tuple = (Exception,),
    **kwargs: Any,
) -> Optional[T]:
    """
    Execute a callable, logging and suppressing expected failures.

    Args:
        func: Callable to execute
        *args: Positional arguments for the callable
        default: Value returned when the call fails
        error_message: Prefix for the logged error message
        expected: Exception types to suppress; anything else propagates
        **kwargs: Keyword arguments for the callable

    Returns:
        The callable's result, or ``default`` if it raised an expected error
    """
    try:
        return func(*args, **kwargs)
    except expected as e:
        severity = e.severity if isinstance(e, AppError) else ErrorSeverity.WARNING
        error = AppError(
            f"{error_message}: {str(e)}",
            severity=severity,
            cause=e,
        )
        logger.warning(str(error), extra={"error": error.to_dict()})
        return default
