"""Domain layer: structured events and model lifecycle events."""
from herald.domain.events import DomainEvent
from herald.domain.observable import LIFECYCLE_EVENTS, Observable, Observer

__all__ = [
    "DomainEvent",
    "Observable",
    "Observer",
    "LIFECYCLE_EVENTS",
]
