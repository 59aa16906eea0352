"""
Model lifecycle events. A model class fires "model.<event>: <ClassName>"
through a class-level dispatcher; "-ing" events can be vetoed by a listener
returning False.
"""
from __future__ import annotations

import re
from typing import Any, ClassVar

from herald.events.dispatcher import EventDispatcher

LIFECYCLE_EVENTS = (
    "retrieved",
    "creating",
    "created",
    "updating",
    "updated",
    "saving",
    "saved",
    "deleting",
    "deleted",
    "restoring",
    "restored",
    "force_deleted",
)


def snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class Observer:
    """Base observer: override the lifecycle methods you need. Each receives the model."""

    def retrieved(self, model: Any) -> Any: ...

    def creating(self, model: Any) -> Any: ...

    def created(self, model: Any) -> Any: ...

    def updating(self, model: Any) -> Any: ...

    def updated(self, model: Any) -> Any: ...

    def saving(self, model: Any) -> Any: ...

    def saved(self, model: Any) -> Any: ...

    def deleting(self, model: Any) -> Any: ...

    def deleted(self, model: Any) -> Any: ...

    def restoring(self, model: Any) -> Any: ...

    def restored(self, model: Any) -> Any: ...

    def force_deleted(self, model: Any) -> Any: ...


class Observable:
    """
    Mixin for models. Listeners are registered per class:

        User.set_event_dispatcher(app.events)
        User.on("saving", check_email)
        User.observe(UserObserver())
        if not await user.fire_model_event("saving"):
            return  # vetoed
    """

    _dispatcher: ClassVar[EventDispatcher | None] = None

    @classmethod
    def set_event_dispatcher(cls, dispatcher: EventDispatcher) -> None:
        cls._dispatcher = dispatcher

    @classmethod
    def get_event_dispatcher(cls) -> EventDispatcher | None:
        return cls._dispatcher

    @classmethod
    def unset_event_dispatcher(cls) -> None:
        cls._dispatcher = None

    @classmethod
    def model_event_name(cls, event: str) -> str:
        return f"model.{event}: {cls.__name__}"

    @classmethod
    def on(cls, event: str, listener: Any) -> None:
        dispatcher = cls._require_dispatcher()
        dispatcher.listen(cls.model_event_name(event), listener)

    @classmethod
    def observe(cls, observer: Any) -> None:
        """
        Register every lifecycle method the observer defines (camelCase names also accepted).
        No-op methods inherited unchanged from Observer are skipped.
        """
        if isinstance(observer, type):
            observer = observer()
        for name in dir(observer):
            event = snake_case(name)
            if event not in LIFECYCLE_EVENTS:
                continue
            if getattr(type(observer), name, None) is getattr(Observer, name, object()):
                continue
            method = getattr(observer, name)
            if callable(method):
                cls.on(event, method)

    @classmethod
    def _require_dispatcher(cls) -> EventDispatcher:
        if cls._dispatcher is None:
            raise RuntimeError(f"{cls.__name__} has no event dispatcher; call set_event_dispatcher() first")
        return cls._dispatcher

    async def fire_model_event(self, event: str, halt: bool = True) -> bool:
        """
        Fire a lifecycle event with the model as payload.
        Halting events stop at the first answer; False from that answer is a veto.
        Always True when no dispatcher is set.
        """
        dispatcher = type(self)._dispatcher
        if dispatcher is None:
            return True
        name = self.model_event_name(event)
        if halt:
            result = await dispatcher.until(name, [self])
            return result is not False
        await dispatcher.dispatch(name, [self])
        return True
