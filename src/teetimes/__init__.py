"""
IKGA golf tee time availability.
"""

__version__ = '0.1.0'

from .exceptions import (
    ArgumentError,
    AuthenticationError,
    CacheWriteError,
    DataError,
    HttpStatusError,
    LogicError,
    MarkupError,
    NotFoundError,
    TeeTimesError,
    TransportError,
)

__all__ = [
    'ArgumentError',
    'AuthenticationError',
    'CacheWriteError',
    'DataError',
    'HttpStatusError',
    'LogicError',
    'MarkupError',
    'NotFoundError',
    'TeeTimesError',
    'TransportError',
]
