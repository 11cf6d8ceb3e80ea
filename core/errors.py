# core/errors.py

"""
Exception taxonomy for the grade roster.

These exceptions are raised inside helpers and converted into `Response` objects
(and user notifications) at the public boundary of `RecordStore` and `RosterController`.
None of them is meant to reach the top-level menu loop.
"""

from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    MISSING_FIELD = "missing-field"
    NOT_A_NUMBER = "not-a-number"
    OUT_OF_RANGE = "out-of-range"


class RosterError(Exception):
    """Base class for all roster errors."""


class ValidationError(RosterError):
    """User input was rejected. Never fatal, state is left unchanged."""

    def __init__(self, reason: ValidationReason, detail: str | None = None):
        self.reason = reason
        self.detail = detail or reason.value
        super().__init__(self.detail)


class PersistenceError(RosterError):
    pass


class PersistenceReadError(PersistenceError):
    """The stored payload is malformed or could not be read."""


class PersistenceWriteError(PersistenceError):
    """The payload could not be written (storage unavailable or full)."""
