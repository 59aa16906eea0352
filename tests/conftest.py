from __future__ import annotations

import pytest

from herald.core.container import Container
from herald.events.dispatcher import EventDispatcher


@pytest.fixture
def container() -> Container:
    return Container()


@pytest.fixture
def events(container: Container) -> EventDispatcher:
    return EventDispatcher(container)


class Recorder:
    """Collects (label, args) pairs in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def listener(self, label: str, result=None):
        def _listener(*args):
            self.calls.append((label, args))
            return result

        return _listener

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.calls]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
