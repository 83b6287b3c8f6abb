"""
Typed failures raised by the data access layer
"""
from typing import Any, Optional


class StoreError(Exception):
    """Base class for every failure surfaced by the access layer"""

    def __init__(self, message: str, code: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class ConfigurationError(StoreError):
    """Store (or admin credential) configuration is missing"""


class PersistenceError(StoreError):
    """The backend reported a failure"""


class NotFoundError(PersistenceError):
    """A single-row read or update matched no rows"""


class RecordValidationError(StoreError, ValueError):
    """A value was rejected before any query was issued"""
