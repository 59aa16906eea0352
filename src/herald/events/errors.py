"""Errors raised by the event engine. Listener exceptions themselves are never wrapped."""


class EventError(Exception):
    """Base class for event engine errors."""


class ListenerConfigurationError(EventError):
    """A listener cannot be turned into something invocable (bad shape, unresolvable service, no handle)."""


class SubscriberConfigurationError(ListenerConfigurationError):
    """A subscriber does not expose subscribe(dispatcher)."""
