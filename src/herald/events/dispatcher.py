"""
EventDispatcher: listen / dispatch / until / subscribe / forget / flush.
One explicit instance per application (EventsModule binds it as "events").
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from herald.events.errors import SubscriberConfigurationError
from herald.events.listeners import Listener, build
from herald.events.protocol import ServiceLocator
from herald.events.registry import ListenerRegistry
from herald.events.wildcard import WILDCARD

logger = logging.getLogger(__name__)


def event_name(event: Any) -> str:
    """A string is its own name; any other event is named by its type."""
    if isinstance(event, str):
        return event
    return type(event).__name__


class EventDispatcher:
    """
    Dispatcher: listeners run one at a time, in registration order, exact
    names before wildcard patterns. Sync and async listeners can be mixed;
    each result is awaited before the next listener starts.

    container resolves listeners registered by identifier (string or class
    with handle); it is only consulted at dispatch time.
    """

    def __init__(
        self,
        container: ServiceLocator | None = None,
        *,
        wildcard: str = WILDCARD,
        flush_suffix: str = "_flushed",
        registry: ListenerRegistry | None = None,
    ) -> None:
        self._container = container
        self._registry = registry if registry is not None else ListenerRegistry(wildcard=wildcard)
        self.flush_suffix = flush_suffix

    @property
    def container(self) -> ServiceLocator | None:
        return self._container

    @property
    def registry(self) -> ListenerRegistry:
        return self._registry

    def listen(self, events: str | Iterable[str], listener: Any) -> EventDispatcher:
        """Register listener for one name or several. Returns self for chaining."""
        self._registry.listen(events, listener)
        return self

    def has_listeners(self, event_name: str) -> bool:
        return self._registry.has_listeners(event_name)

    def has_wildcard_listeners(self, event_name: str) -> bool:
        return self._registry.has_wildcard_listeners(event_name)

    def forget(self, event: str) -> None:
        self._registry.forget(event)

    def get_listeners(self, event_name: str) -> tuple[Listener, ...]:
        return self._registry.get_listeners(event_name)

    def subscribe(self, subscriber: Any) -> EventDispatcher:
        """
        Let subscriber register its listeners: subscriber.subscribe(self).
        A class is instantiated first (through the container when it is bound there).
        """
        if isinstance(subscriber, type):
            subscriber = build(subscriber, self._container)
        register = getattr(subscriber, "subscribe", None)
        if not callable(register):
            raise SubscriberConfigurationError(
                f"Event subscriber [{type(subscriber).__qualname__}] does not have a subscribe method."
            )
        register(self)
        logger.debug("subscribed %s", type(subscriber).__qualname__)
        return self

    async def dispatch(self, event: Any, payload: Any = (), halt: bool = False) -> Any:
        """
        Fire event and call its listeners.

        Returns None when nothing listens. In halt mode returns the first
        response that is not None (later listeners never run), or None.
        Otherwise returns the list of responses; a listener returning False
        stops the remaining ones and is not included in the list.
        payload follows the listener spreading rule: a list or tuple becomes
        positional arguments, any other value (None included) is one argument.
        Listener exceptions propagate and stop the dispatch.
        """
        name = event_name(event)
        listeners = self._registry.get_listeners(name)
        if not listeners:
            return None

        logger.debug("dispatch %s to %d listener(s)%s", name, len(listeners), " (halt)" if halt else "")
        responses: list[Any] = []
        for listener in listeners:
            response = await listener.invoke(event, payload, self._container)

            if halt and response is not None:
                logger.debug("dispatch %s halted by %s", name, listener.name)
                return response

            if response is False:
                logger.debug("dispatch %s stopped by %s", name, listener.name)
                break

            responses.append(response)

        return None if halt else responses

    async def until(self, event: Any, payload: Any = ()) -> Any:
        """Fire event until the first listener returns something other than None."""
        return await self.dispatch(event, payload, halt=True)

    async def flush(self, event: str) -> Any:
        """Signal end of a batch: dispatch "<event>_flushed" with no payload."""
        return await self.dispatch(f"{event}{self.flush_suffix}")
