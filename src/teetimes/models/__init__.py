"""Models for the tee times application."""

from .session import Credentials
from .session import IdPairSession
from .session import QueryStringSession
from .session import Session
from .session import SessionFormat
from .tee_time import Column
from .tee_time import TimeSlot

__all__ = [
    'Column',
    'Credentials',
    'IdPairSession',
    'QueryStringSession',
    'Session',
    'SessionFormat',
    'TimeSlot',
]
