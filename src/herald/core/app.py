"""Application: composed from modules via app.register(module); owns the service container."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from herald.core.container import Container
from herald.core.module import Module

if TYPE_CHECKING:
    from herald.events.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Config, when given, is available as container.resolve(type(config)) and container.resolve("config").
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._container.register_instance(Application, self)
        self._container.register_instance(Container, self._container)
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)

    def register(self, module: Module) -> Application:
        """Register a module (EventsModule, etc.). Returns self for chaining."""
        if not isinstance(module, Module):
            raise TypeError(f"{type(module).__name__} does not implement register_into(app)")
        module.register_into(self)
        self._modules.append(module)
        logger.debug("registered module %s", type(module).__name__)
        return self

    @property
    def modules(self) -> tuple[Module, ...]:
        return tuple(self._modules)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    def make(self, key: Any) -> Any:
        return self._container.resolve(key)

    @property
    def events(self) -> EventDispatcher:
        """The dispatcher bound by EventsModule. KeyError if no EventsModule was registered."""
        return self._container.resolve("events")
