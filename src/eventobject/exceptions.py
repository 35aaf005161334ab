"""Exception hierarchy for the eventobject package."""

from __future__ import annotations


class EventObjectError(RuntimeError):
    """Base class for all package-level errors."""


class InvalidEventConstructionError(EventObjectError, ValueError):
    """Raised when an event variant rejects its constructor arguments."""


class ConfigValidationError(EventObjectError):
    """Raised when configuration cannot be validated safely."""
