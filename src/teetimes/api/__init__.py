"""API clients for the tee times application."""

from .base_api import BaseAPI
from .ikga import IkgaAPI

__all__ = ['BaseAPI', 'IkgaAPI']
