"""Domain events: structured event values dispatched by type name."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class DomainEvent:
    """Base domain event type. Subclasses are dataclasses with fields; the class name is the event name."""

    @classmethod
    def event_name(cls) -> str:
        return cls.__name__

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
