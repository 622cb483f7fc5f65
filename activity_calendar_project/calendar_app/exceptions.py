"""
Custom exceptions for calendar_app with error codes and user-friendly messages.

Exception Hierarchy:
- CalendarAppError (base)
  - InvalidMonthError (month value could not be built)
  - CalendarValidationError (request parameters rejected - user can fix)
  - ActivityQueryError (activity storage failed - contact admin)
"""
from typing import Optional, Dict, Any


class CalendarAppError(Exception):
    """
    Base exception for all calendar_app errors.

    Provides standardized error handling with:
    - error_code: Machine-readable identifier for filtering/alerting
    - user_message: Safe, user-friendly message to display
    - status_code: HTTP status used when the error reaches a view
    - details: Additional context for logging (not shown to users)
    """

    error_code: str = "CALENDAR_ERROR"
    user_message: str = "An error occurred. Please try again."
    status_code: int = 500

    def __init__(
        self,
        message: str = None,
        error_code: str = None,
        user_message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize CalendarAppError.

        Args:
            message: Technical error message for logging
            error_code: Override default error code
            user_message: Override default user message
            details: Additional context for logging
        """
        self.message = message or self.__class__.__doc__ or "An error occurred"
        if error_code is not None:
            self.error_code = error_code
        if user_message is not None:
            self.user_message = user_message
        self.details = details or {}

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "user_message": self.user_message,
            "details": self.details,
            "exception_type": self.__class__.__name__
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.error_code}, message={self.message!r})"


class InvalidMonthError(CalendarAppError, ValueError):
    """Year/month combination does not describe a calendar month."""

    error_code = "INVALID_MONTH"
    user_message = "The requested month is not valid."
    status_code = 400


class CalendarValidationError(CalendarAppError):
    """
    Request parameters were rejected.

    Not a system failure: the caller can correct the input and retry.
    """

    error_code = "VALIDATION_ERROR"
    user_message = "There was an issue with your request. Please check your input."
    status_code = 400

    def __init__(self, message: str = None, field: Optional[str] = None, **kwargs):
        details = kwargs.pop('details', None) or {}
        if field:
            details['field'] = field
        self.field = field
        super().__init__(message, user_message=kwargs.pop('user_message', message), details=details, **kwargs)


class ActivityQueryError(CalendarAppError):
    """Loading activities from storage failed."""

    error_code = "ACTIVITY_QUERY"
    user_message = "Activities could not be loaded. Please contact admin if this persists."
    status_code = 503
