"""Structured exception classes for the HTTP API helper.

These are never raised out of an :class:`~http_api_helper.api_helper.APIHelper`
operation. They are carried inside a
:class:`~http_api_helper.result.Failure` so callers branch on the
result instead of catching.
"""

import json
from typing import Any, Dict, Optional

import httpx


class APIExceptionBase(Exception):
    """Base exception for every failure kind an API call can report.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class NoInternetException(APIExceptionBase):
    """Raised when the connectivity probe reports the network unreachable.

    No request was attempted when this is reported.
    """

    def __init__(self, message: str = "No internet connection"):
        """Initialize no-internet error with an optional message."""
        super().__init__(message=message, code="NO_INTERNET")


class TimeoutException(APIExceptionBase):
    """Raised when the transport call exceeds the configured duration.

    :param duration_in_seconds: The timeout that was exceeded
    """

    def __init__(self, duration_in_seconds: int):
        """Initialize timeout error with the configured duration."""
        super().__init__(
            message=f"Request timed out after {duration_in_seconds} seconds",
            code="TIMEOUT",
            details={"duration_in_seconds": duration_in_seconds},
        )
        self.duration_in_seconds = duration_in_seconds


class UnexpectedStatusCodeException(APIExceptionBase):
    """Raised when a response arrives with a status outside 200-299.

    The full response is kept so callers can inspect headers and body.

    :param response: The received response
    """

    def __init__(self, response: httpx.Response):
        """Initialize status error from the received response."""
        super().__init__(
            message=f"Unexpected status code {response.status_code}",
            code="UNEXPECTED_STATUS",
            details={"status_code": response.status_code},
        )
        self.response = response

    @property
    def status_code(self) -> int:
        """Status code of the carried response."""
        return self.response.status_code


class UnhandledException(APIExceptionBase):
    """Wraps any other error raised while building, sending or decoding.

    :param original_error: The exception that was caught
    """

    def __init__(self, original_error: BaseException):
        """Initialize the wrapper around the original error."""
        super().__init__(
            message=str(original_error) or type(original_error).__name__,
            code="UNHANDLED",
            details={"error_type": type(original_error).__name__},
        )
        self.original_error = original_error
