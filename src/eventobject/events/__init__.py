"""Event values handed from whatever raised a notification to its listeners."""

from .base import Event, EventListener, SourcedEvent
from .domain import ActionEvent, StateTransitionEvent, ValueChangedEvent

__all__ = [
    "ActionEvent",
    "Event",
    "EventListener",
    "SourcedEvent",
    "StateTransitionEvent",
    "ValueChangedEvent",
]
