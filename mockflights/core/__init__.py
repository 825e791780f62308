"""
Core configuration and error types
"""

from .config import settings, Settings
from .exceptions import FlightServiceError, ValidationError, InternalError

__all__ = [
    'settings',
    'Settings',
    'FlightServiceError',
    'ValidationError',
    'InternalError',
]
