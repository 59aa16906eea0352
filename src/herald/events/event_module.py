"""
EventsModule: building block that binds one EventDispatcher into the app.
Declare listeners/subscribers up front; register with app.register(events_module).
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from herald.core.app import Application
from herald.core.config import EventsConfig
from herald.core.module import Module
from herald.events.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


class EventsModule(Module):
    """
    Event dispatcher as object. Available in container as EventDispatcher,
    "events" and "EventDispatcher". Settings come from EventsConfig when the
    container has one, else defaults.
    """

    def __init__(self) -> None:
        self._listen: list[tuple[str | Iterable[str], Any]] = []
        self._subscribers: list[Any] = []
        self._dispatcher: EventDispatcher | None = None

    def listen(self, events: str | Iterable[str], listener: Any) -> EventsModule:
        """Listener applied on register_into (after the container exists)."""
        if not isinstance(events, str):
            events = list(events)
        self._listen.append((events, listener))
        return self

    def subscribe(self, subscriber: Any) -> EventsModule:
        """Subscriber (instance or class) applied on register_into."""
        self._subscribers.append(subscriber)
        return self

    @property
    def dispatcher(self) -> EventDispatcher | None:
        """The dispatcher created by register_into, None before that."""
        return self._dispatcher

    def _config(self, app: Application) -> EventsConfig:
        if app.container.has(EventsConfig):
            return app.container.resolve(EventsConfig)
        return EventsConfig()

    def register_into(self, app: Application) -> None:
        config = self._config(app)
        dispatcher = EventDispatcher(
            app.container,
            wildcard=config.wildcard,
            flush_suffix=config.flush_suffix,
        )
        app.container.register_instance(EventDispatcher, dispatcher)
        app.container.register_instance("events", dispatcher)
        app.container.alias("EventDispatcher", "events")
        for events, listener in self._listen:
            dispatcher.listen(events, listener)
        for subscriber in self._subscribers:
            dispatcher.subscribe(subscriber)
        self._dispatcher = dispatcher
        logger.debug(
            "events module registered: %d listener(s), %d subscriber(s)",
            len(self._listen),
            len(self._subscribers),
        )
