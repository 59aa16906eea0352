"""Listener registry: exact names, wildcard patterns, and a cache of pattern matches per event name."""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Iterable

from herald.events.listeners import Listener, make_listener
from herald.events.wildcard import WILDCARD, is_wildcard, matches

logger = logging.getLogger(__name__)

CACHE_SIZE = 1024


def _names(events: str | Iterable[str]) -> list[str]:
    if isinstance(events, str):
        return [events]
    names = list(events)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"event names must be strings, got {type(name).__name__}")
    return names


class ListenerRegistry:
    """
    Two ordered maps (exact name -> listeners, pattern -> listeners) plus a
    derived cache name -> matching wildcard listeners. Any change to the
    pattern map clears the whole cache; otherwise it keeps the cache_size
    most recently looked-up names.

    All access goes through one lock; lookups return tuples so callers can
    run listeners after the lock is released.
    """

    def __init__(self, wildcard: str = WILDCARD, cache_size: int = CACHE_SIZE) -> None:
        if cache_size < 1:
            raise ValueError("cache_size must be at least 1")
        self.wildcard = wildcard
        self.cache_size = cache_size
        self._listeners: dict[str, list[Listener]] = {}
        self._wildcards: dict[str, list[Listener]] = {}
        self._wildcards_cache: OrderedDict[str, tuple[Listener, ...]] = OrderedDict()
        self._lock = threading.RLock()

    def listen(self, events: str | Iterable[str], listener: Any) -> ListenerRegistry:
        """Append listener under each name; wildcard names go to the pattern map. No de-duplication."""
        for event in _names(events):
            if is_wildcard(event, self.wildcard):
                self._setup_wildcard_listen(event, listener)
            else:
                adapter = make_listener(listener, event)
                with self._lock:
                    self._listeners.setdefault(event, []).append(adapter)
                logger.debug("listen %s -> %s", event, adapter.name)
        return self

    def _setup_wildcard_listen(self, pattern: str, listener: Any) -> None:
        adapter = make_listener(listener, pattern, wildcard=True)
        with self._lock:
            self._wildcards.setdefault(pattern, []).append(adapter)
            self._wildcards_cache.clear()
        logger.debug("listen %s (wildcard) -> %s", pattern, adapter.name)

    def has_listeners(self, event_name: str) -> bool:
        with self._lock:
            if self._listeners.get(event_name) or self._wildcards.get(event_name):
                return True
            return self.has_wildcard_listeners(event_name)

    def has_wildcard_listeners(self, event_name: str) -> bool:
        with self._lock:
            return any(matches(pattern, event_name, self.wildcard) for pattern in self._wildcards)

    def forget(self, event: str) -> None:
        """
        Remove the exact entry and the pattern entry stored under this exact key.
        Other patterns that happen to match the name are left alone.
        """
        with self._lock:
            self._listeners.pop(event, None)
            if self._wildcards.pop(event, None) is not None:
                self._wildcards_cache.clear()
        logger.debug("forget %s", event)

    def get_listeners(self, event_name: str) -> tuple[Listener, ...]:
        """Exact listeners in registration order, then matching wildcard listeners."""
        with self._lock:
            return tuple(self._listeners.get(event_name, ())) + self.get_wildcard_listeners(event_name)

    def get_wildcard_listeners(self, event_name: str) -> tuple[Listener, ...]:
        with self._lock:
            if not self._wildcards:
                return ()
            cached = self._wildcards_cache.get(event_name)
            if cached is not None:
                self._wildcards_cache.move_to_end(event_name)
                return cached
            found: list[Listener] = []
            for pattern, listeners in self._wildcards.items():
                if matches(pattern, event_name, self.wildcard):
                    found.extend(listeners)
            cached = self._wildcards_cache[event_name] = tuple(found)
            if len(self._wildcards_cache) > self.cache_size:
                self._wildcards_cache.popitem(last=False)
            return cached

    def events(self) -> list[str]:
        with self._lock:
            return list(self._listeners)

    def patterns(self) -> list[str]:
        with self._lock:
            return list(self._wildcards)

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()
            self._wildcards.clear()
            self._wildcards_cache.clear()
