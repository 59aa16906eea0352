"""Skeleton templates for make-listener, make-subscriber, make-event."""

LISTENER_PY = '''"""Listener {name}."""
from __future__ import annotations

from typing import Any


class {name}:
    """Register with events.listen("<event>", {name}) or events.listen("<event>", "{snake}")."""

    async def handle(self, *payload: Any) -> Any:
        # return False to stop later listeners; in until() mode any non-None value is the answer
        return None
'''

SUBSCRIBER_PY = '''"""Subscriber {name}: registers several listeners in one call."""
from __future__ import annotations

from typing import Any

from herald.events import EventDispatcher


class {name}:
    """Register with events.subscribe({name}) or EventsModule().subscribe({name})."""

    def subscribe(self, events: EventDispatcher) -> None:
        events.listen("{snake}.created", self.on_created)
        events.listen("{snake}.*", self.on_any)

    async def on_created(self, *payload: Any) -> None:
        ...

    async def on_any(self, event: Any, payload: Any) -> None:
        ...
'''

EVENT_PY = '''"""Event {name}."""
from dataclasses import dataclass

from herald.domain import DomainEvent


@dataclass
class {name}(DomainEvent):
    """Dispatched as "{name}": await events.dispatch({name}(...))."""
    # add fields
'''
