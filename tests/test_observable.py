from __future__ import annotations

import asyncio

import pytest

from herald.domain import DomainEvent, Observable, Observer
from herald.events.dispatcher import EventDispatcher


class User(Observable):
    def __init__(self, email: str) -> None:
        self.email = email


class Post(Observable):
    pass


@pytest.fixture(autouse=True)
def reset_dispatchers():
    yield
    User.unset_event_dispatcher()
    Post.unset_event_dispatcher()


def run(coro):
    return asyncio.run(coro)


def test_without_dispatcher_events_pass():
    assert run(User("a@b.c").fire_model_event("saving")) is True


def test_on_requires_dispatcher():
    with pytest.raises(RuntimeError):
        User.on("saving", print)


def test_event_name_includes_class():
    assert User.model_event_name("saving") == "model.saving: User"


def test_listener_can_veto_halting_event():
    events = EventDispatcher()
    User.set_event_dispatcher(events)
    User.on("saving", lambda user: False if not user.email else None)

    assert run(User("a@b.c").fire_model_event("saving")) is True
    assert run(User("").fire_model_event("saving")) is False


def test_non_halting_event_runs_every_listener():
    events = EventDispatcher()
    User.set_event_dispatcher(events)
    seen = []
    User.on("saved", lambda user: seen.append(1))
    User.on("saved", lambda user: seen.append(2))

    assert run(User("a@b.c").fire_model_event("saved", halt=False)) is True
    assert seen == [1, 2]


def test_events_are_scoped_per_model_class():
    events = EventDispatcher()
    User.set_event_dispatcher(events)
    Post.set_event_dispatcher(events)
    User.on("deleting", lambda model: False)

    assert run(Post().fire_model_event("deleting")) is True
    assert run(User("x").fire_model_event("deleting")) is False


def test_wildcard_listener_sees_every_model_event():
    events = EventDispatcher()
    User.set_event_dispatcher(events)
    names = []
    events.listen("model.*: User", lambda event, payload: names.append(event))

    user = User("a@b.c")
    run(user.fire_model_event("creating"))
    run(user.fire_model_event("created", halt=False))

    assert names == ["model.creating: User", "model.created: User"]


def test_observer_methods_are_registered():
    class UserObserver(Observer):
        def __init__(self) -> None:
            self.calls = []

        def creating(self, user):
            self.calls.append(("creating", user.email))

        def forceDeleted(self, user):
            self.calls.append(("force_deleted", user.email))

        def unrelated(self, user):
            raise AssertionError("not a lifecycle event")

    events = EventDispatcher()
    User.set_event_dispatcher(events)
    observer = UserObserver()
    User.observe(observer)

    user = User("a@b.c")
    run(user.fire_model_event("creating"))
    run(user.fire_model_event("force_deleted", halt=False))

    assert observer.calls == [("creating", "a@b.c"), ("force_deleted", "a@b.c")]
    assert not events.has_listeners("model.unrelated: User")


def test_observer_class_is_instantiated():
    class RestoreObserver(Observer):
        def restored(self, user):
            return "restored"

    events = EventDispatcher()
    User.set_event_dispatcher(events)
    User.observe(RestoreObserver)
    assert events.has_listeners("model.restored: User")
    assert run(User("a").fire_model_event("restoring")) is True


def test_inherited_no_op_observer_methods_are_not_registered():
    class SavedObserver(Observer):
        def saved(self, user):
            return "saved"

    events = EventDispatcher()
    User.set_event_dispatcher(events)
    User.observe(SavedObserver())

    assert events.registry.events() == ["model.saved: User"]
    assert run(events.dispatch("model.saved: User", [User("a")])) == ["saved"]


def test_base_observer_registers_nothing():
    events = EventDispatcher()
    User.set_event_dispatcher(events)
    User.observe(Observer)
    assert events.registry.events() == []


def test_domain_event():
    from dataclasses import dataclass

    @dataclass
    class OrderPlaced(DomainEvent):
        order_id: str

    event = OrderPlaced("o-1")
    assert OrderPlaced.event_name() == "OrderPlaced"
    assert event.to_dict() == {"order_id": "o-1"}
