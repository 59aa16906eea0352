"""Capabilities the engine consumes: handler objects, subscribers, the service locator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from herald.events.dispatcher import EventDispatcher


@runtime_checkable
class Handler(Protocol):
    """Object listener: the engine calls handle(*payload), or handle(event, payload) for wildcard keys."""

    def handle(self, *args: Any) -> Any:
        ...


@runtime_checkable
class Subscriber(Protocol):
    """Registers many listeners in one call: subscribe(events) calls events.listen(...) as needed."""

    def subscribe(self, events: EventDispatcher) -> Any:
        ...


@runtime_checkable
class ServiceLocator(Protocol):
    """
    Turns a listener identifier into a live instance at dispatch time.
    Container satisfies it; raising KeyError means "not bound".
    """

    def resolve(self, key: Any) -> Any:
        ...
