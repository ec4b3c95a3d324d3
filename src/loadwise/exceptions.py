"""
Custom exceptions for LoadWise.

The analytics engine itself models missing or degenerate data as absent
values, so these exceptions only surface at the boundaries: reading history
files, parsing user input and calling the low-level analyzers directly.
Each exception includes:
- A descriptive message
- An error code
- Optional details for debugging
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # History errors
    HISTORY_FORMAT_ERROR = "HISTORY_FORMAT_ERROR"
    HISTORY_NOT_FOUND = "HISTORY_NOT_FOUND"
    INSUFFICIENT_DATA = "INSUFFICIENT_DATA"


class LoadWiseError(Exception):
    """
    Base exception for all LoadWise errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ValidationError(LoadWiseError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


class HistoryFormatError(ValidationError):
    """Raised when a history file cannot be parsed into run records."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if source:
            error_details["source"] = source
        super().__init__(message=message, details=error_details)
        self.code = ErrorCode.HISTORY_FORMAT_ERROR


class HistoryNotFoundError(LoadWiseError):
    """Raised when a history file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(
            message=f"History file not found: {path}",
            code=ErrorCode.HISTORY_NOT_FOUND,
            details={"path": path},
        )


class InsufficientDataError(LoadWiseError, ValueError):
    """Raised when a computation needs at least one record and got none."""

    def __init__(self, message: str = "At least one run record is required") -> None:
        super().__init__(message=message, code=ErrorCode.INSUFFICIENT_DATA)
