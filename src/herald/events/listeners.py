"""
Listener adapters: every listener shape is normalized once, at registration,
into a Listener with a single invoke(event, payload, locator) contract.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from herald.events.errors import ListenerConfigurationError
from herald.events.protocol import Handler, ServiceLocator


class ListenerKind(enum.Enum):
    CALLABLE = "callable"
    HANDLER = "handler"
    SERVICE = "service"


def _has_handle(obj: Any) -> bool:
    return isinstance(obj, Handler) and callable(obj.handle)


def _describe(target: Any) -> str:
    if isinstance(target, str):
        return target
    return getattr(target, "__qualname__", None) or type(target).__qualname__


def build(cls: type[Any], locator: ServiceLocator | None) -> Any:
    """Instance of cls: from the locator when it has a binding for cls, else cls() with no arguments."""
    has = getattr(locator, "has", None)
    if locator is not None and callable(has) and has(cls):
        return locator.resolve(cls)
    return cls()


def spread(payload: Any) -> tuple[Any, ...]:
    """Positional arguments for a non-wildcard listener: lists and tuples are spread, anything else is one argument."""
    if isinstance(payload, (list, tuple)):
        return tuple(payload)
    return (payload,)


@dataclass(frozen=True, eq=False)
class Listener:
    """
    One registration. Immutable; identity (not value) equality so that the same
    callable registered twice stays two entries.
    """

    kind: ListenerKind
    target: Any
    pattern: str
    wildcard: bool = False

    @property
    def name(self) -> str:
        return _describe(self.target)

    def _arguments(self, event: Any, payload: Any) -> tuple[Any, ...]:
        if self.wildcard:
            return (event, payload)
        return spread(payload)

    def _resolve(self, locator: ServiceLocator | None) -> Any:
        if isinstance(self.target, type):
            instance = build(self.target, locator)
            if not _has_handle(instance):
                raise ListenerConfigurationError(f"Event listener [{self.name}] does not have a handle method.")
            return instance
        if locator is None:
            raise ListenerConfigurationError(
                f"Event listener [{self.name}] is a service identifier but the dispatcher has no container"
            )
        try:
            instance = locator.resolve(self.target)
        except KeyError as exc:
            raise ListenerConfigurationError(f"Event listener [{self.name}] could not be resolved") from exc
        if not _has_handle(instance):
            raise ListenerConfigurationError(f"Event listener [{self.name}] does not have a handle method.")
        return instance

    async def invoke(self, event: Any, payload: Any, locator: ServiceLocator | None = None) -> Any:
        """Call the listener; awaitable results are awaited before returning."""
        args = self._arguments(event, payload)
        if self.kind is ListenerKind.CALLABLE:
            result = self.target(*args)
        elif self.kind is ListenerKind.HANDLER:
            result = self.target.handle(*args)
        else:
            result = self._resolve(locator).handle(*args)
        if hasattr(result, "__await__"):
            result = await result
        return result


def make_listener(listener: Any, pattern: str, wildcard: bool = False) -> Listener:
    """
    Classify listener:
    - str                             -> SERVICE, resolved through the locator on each dispatch
    - class exposing handle           -> SERVICE, built on each dispatch the same way subscriber
                                         classes are: from the locator when bound there, else cls()
    - object exposing handle          -> HANDLER
    - any other callable              -> CALLABLE
    Anything else is rejected here rather than at first dispatch.
    """
    if isinstance(listener, Listener):
        listener = listener.target
    if isinstance(listener, str):
        if not listener:
            raise ListenerConfigurationError("Event listener identifier must not be empty")
        kind = ListenerKind.SERVICE
    elif isinstance(listener, type) and _has_handle(listener):
        kind = ListenerKind.SERVICE
    elif _has_handle(listener):
        kind = ListenerKind.HANDLER
    elif callable(listener):
        kind = ListenerKind.CALLABLE
    else:
        raise ListenerConfigurationError(
            f"Event listener [{_describe(listener)}] is neither callable nor has a handle method."
        )
    return Listener(kind=kind, target=listener, pattern=pattern, wildcard=wildcard)
