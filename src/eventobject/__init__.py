"""Top-level package for eventobject."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .events import (
    ActionEvent,
    Event,
    EventListener,
    SourcedEvent,
    StateTransitionEvent,
    ValueChangedEvent,
)
from .exceptions import (
    ConfigValidationError,
    EventObjectError,
    InvalidEventConstructionError,
)

if TYPE_CHECKING:
    from .config import load_config
    from .diagnostics import EventDiagnostics, event_fields
    from .logging_utils import configure_logging

__all__ = [
    "ActionEvent",
    "ConfigValidationError",
    "Event",
    "EventDiagnostics",
    "EventListener",
    "EventObjectError",
    "InvalidEventConstructionError",
    "SourcedEvent",
    "StateTransitionEvent",
    "ValueChangedEvent",
    "configure_logging",
    "event_fields",
    "load_config",
]


def __getattr__(name: str) -> Any:
    """Lazily import helpers that pull in pydantic and structlog."""
    if name == "load_config":
        from .config import load_config

        return load_config
    if name in {"EventDiagnostics", "event_fields"}:
        from .diagnostics import EventDiagnostics, event_fields

        return {"EventDiagnostics": EventDiagnostics, "event_fields": event_fields}[name]
    if name == "configure_logging":
        from .logging_utils import configure_logging

        return configure_logging
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
