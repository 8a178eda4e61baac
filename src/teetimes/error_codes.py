"""Error codes for the tee times application."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Input Errors
    INVALID_ARGUMENT = "invalid_argument"
    
    # Authentication Errors
    AUTH_FAILED = "auth_failed"
    
    # Transport Errors
    REQUEST_FAILED = "request_failed"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    
    # Data Errors
    INVALID_MARKUP = "invalid_markup"
    MISSING_DATA = "missing_data"
    NOT_FOUND = "not_found"
    
    # Cache Errors
    INVALID_CACHE = "invalid_cache"
    CACHE_WRITE_FAILED = "cache_write_failed"


# Process exit status per error code; anything not listed exits with 1
EXIT_CODES: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: 2,
    ErrorCode.AUTH_FAILED: 10,
}
