from herald.events.dispatcher import EventDispatcher, event_name
from herald.events.errors import EventError, ListenerConfigurationError, SubscriberConfigurationError
from herald.events.event_module import EventsModule
from herald.events.listeners import Listener, ListenerKind, make_listener
from herald.events.protocol import Handler, ServiceLocator, Subscriber
from herald.events.registry import ListenerRegistry
from herald.events.wildcard import compile_pattern, is_wildcard, matches

__all__ = [
    "EventDispatcher",
    "EventsModule",
    "ListenerRegistry",
    "Listener",
    "ListenerKind",
    "make_listener",
    "event_name",
    "Handler",
    "Subscriber",
    "ServiceLocator",
    "EventError",
    "ListenerConfigurationError",
    "SubscriberConfigurationError",
    "compile_pattern",
    "is_wildcard",
    "matches",
]
