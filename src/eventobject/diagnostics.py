"""Structured-log rendering for events.

Listeners and dispatchers that want an audit trail of what they observed can
hand any event to ``EventDiagnostics.log``; only the shared ``SourcedEvent``
capability is relied on, so every variant renders the same way.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

import structlog

from .config import load_config, normalize_level
from .events.base import SourcedEvent
from .exceptions import ConfigValidationError
from .logging_utils import configure_logging


def event_fields(event: SourcedEvent) -> dict[str, Any]:
    """Flatten an event into string-valued log fields, source first."""
    data: dict[str, Any] = {
        "event_type": type(event).__name__,
        "source": str(event.get_source()),
    }
    if is_dataclass(event):
        for field in fields(event):
            if field.name == "source" or not field.repr:
                continue
            data[field.name] = str(getattr(event, field.name))
    return data


class EventDiagnostics:
    """Write observed events to a structlog logger at a fixed level."""

    def __init__(
        self,
        level: str = "DEBUG",
        include_fields: bool = True,
        logger: Any | None = None,
    ) -> None:
        try:
            self.level = normalize_level(level).lower()
        except ValueError as exc:
            raise ConfigValidationError(f"Invalid diagnostics level: {exc}") from exc
        self.include_fields = include_fields
        self._logger = logger or structlog.get_logger(__name__)

    @classmethod
    def from_config(cls, diagnostics_config: dict[str, Any]) -> EventDiagnostics:
        return cls(
            level=str(diagnostics_config.get("level", "DEBUG")),
            include_fields=bool(diagnostics_config.get("include_fields", True)),
        )

    def log(self, event: SourcedEvent, **extra: Any) -> None:
        payload: dict[str, Any] = {
            "event_type": type(event).__name__,
            "rendered": str(event),
        }
        if self.include_fields:
            payload["fields"] = event_fields(event)
        payload.update(extra)
        emit = getattr(self._logger, self.level)
        emit("event.observed", **payload)


def bootstrap(config_path: Path | None = None) -> EventDiagnostics:
    """Load config, configure logging, and return a ready diagnostics helper."""
    config = load_config(config_path=config_path)
    configure_logging(config["logging"])
    return EventDiagnostics.from_config(config["diagnostics"])
