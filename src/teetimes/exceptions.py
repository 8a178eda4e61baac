"""Centralized error definitions for the tee times application."""

from dataclasses import dataclass
from typing import Any

from teetimes.error_codes import EXIT_CODES
from teetimes.error_codes import ErrorCode


@dataclass
class TeeTimesError(Exception):
    """Base exception for all tee times errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    @property
    def exit_code(self) -> int:
        """Process exit status associated with this error."""
        return EXIT_CODES.get(self.code, 1)

class ArgumentError(TeeTimesError):
    """Invalid or missing command line input."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.INVALID_ARGUMENT, details)

class TransportError(TeeTimesError):
    """Connection could not be established or returned no body."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.REQUEST_FAILED,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)

class HttpStatusError(TeeTimesError):
    """Response status code outside the 2xx range."""
    def __init__(self, message: str, status_code: int, url: str | None = None):
        super().__init__(message, ErrorCode.HTTP_STATUS, {"status_code": status_code, "url": url})
        self.status_code = status_code

class MarkupError(TeeTimesError):
    """Content could not be interpreted as HTML."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.INVALID_MARKUP, details)

class LogicError(TeeTimesError):
    """Expected page structure is absent."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.MISSING_DATA, details)

class AuthenticationError(TeeTimesError):
    """Credentials were rejected by the site."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.AUTH_FAILED, details)

class DataError(TeeTimesError):
    """Session cache file holds malformed content."""
    def __init__(self, message: str, file_path: str):
        super().__init__(message, ErrorCode.INVALID_CACHE, {"file_path": file_path})

class CacheWriteError(TeeTimesError):
    """Session cache file could not be written."""
    def __init__(self, message: str, file_path: str):
        super().__init__(message, ErrorCode.CACHE_WRITE_FAILED, {"file_path": file_path})

class NotFoundError(TeeTimesError):
    """Requested schedule column does not exist on the page."""
    def __init__(self, message: str, column_index: int):
        super().__init__(message, ErrorCode.NOT_FOUND, {"column_index": column_index})
