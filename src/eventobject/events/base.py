"""Base event value shared by every notification kind.

Usage:
    event = Event(widget)
    event.get_source() is widget   # True
    str(event)                     # "Event[source=<str(widget)>]"

Concrete kinds subclass ``Event`` as frozen dataclasses and add payload
fields; ``source`` always comes first.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from ..exceptions import InvalidEventConstructionError

E_contra = TypeVar("E_contra", bound="SourcedEvent", contravariant=True)


@dataclass(frozen=True, eq=False)
class Event:
    """Immutable record of something that happened, and where it came from.

    ``source`` is held by reference and never owned. Equality is identity,
    so an event stays hashable whatever its source is.
    """

    source: Any

    # Variants that cannot be raised without an origin set this to True.
    require_source: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self.require_source and self.source is None:
            raise InvalidEventConstructionError(
                f"{type(self).__name__} requires a source."
            )

    def get_source(self) -> Any:
        """Return the object this event originated from."""
        return self.source

    def __str__(self) -> str:
        dump = ", ".join(
            f"{field.name}={getattr(self, field.name)}"
            for field in fields(self)
            if field.repr
        )
        return f"{type(self).__name__}[{dump}]"


@runtime_checkable
class SourcedEvent(Protocol):
    """Capability every event exposes to dispatch code."""

    @property
    def source(self) -> Any: ...

    def get_source(self) -> Any: ...

    def __str__(self) -> str: ...


@runtime_checkable
class EventListener(Protocol[E_contra]):
    """A consumer that is handed one event at a time."""

    def __call__(self, event: E_contra) -> None: ...
