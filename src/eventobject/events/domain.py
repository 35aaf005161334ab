"""Concrete event kinds built on the base Event."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..exceptions import InvalidEventConstructionError
from .base import Event


@dataclass(frozen=True, eq=False)
class ValueChangedEvent(Event):
    """A named value on ``source`` moved from ``old_value`` to ``new_value``."""

    property_name: str
    old_value: Any
    new_value: Any

    def is_change(self) -> bool:
        return self.old_value != self.new_value


@dataclass(frozen=True, eq=False)
class ActionEvent(Event):
    """A command was triggered on ``source`` (button press, menu entry, key)."""

    command: str
    modifiers: tuple[str, ...] = ()

    require_source = True

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.command, str) or not self.command.strip():
            raise InvalidEventConstructionError(
                "ActionEvent command must be a non-empty string."
            )
        # A bare string is one modifier; any other iterable is frozen into a tuple.
        modifiers = self.modifiers
        if isinstance(modifiers, str):
            modifiers = (modifiers,)
        modifiers = tuple(modifiers)
        if not all(isinstance(item, str) and item.strip() for item in modifiers):
            raise InvalidEventConstructionError(
                "ActionEvent modifiers must be non-empty strings."
            )
        object.__setattr__(self, "modifiers", modifiers)


@dataclass(frozen=True, eq=False)
class StateTransitionEvent(Event):
    """``source`` moved from ``from_state`` to ``to_state``."""

    from_state: Any
    to_state: Any
