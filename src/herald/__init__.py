"""
Herald: in-process event dispatch for applications composed from modules.
Listeners are registered by name or wildcard pattern; app.register(EventsModule()) binds the dispatcher.
"""
from herald.core import Application, Config, Container, EventsConfig, Module, load_config_from_env
from herald.domain import DomainEvent, Observable, Observer
from herald.events import EventDispatcher, EventsModule, ListenerConfigurationError, SubscriberConfigurationError

__version__ = "0.1.0"

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "EventsConfig",
    "load_config_from_env",
    "EventDispatcher",
    "EventsModule",
    "ListenerConfigurationError",
    "SubscriberConfigurationError",
    "DomainEvent",
    "Observable",
    "Observer",
]
