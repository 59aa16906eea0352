"""Single config object: user passes it when creating the app; available via DI."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any


class Config:
    """
    Base for application config objects. Pass an instance to Application(config=...);
    it is then resolvable by its own type and as "config".
    """

    @classmethod
    def load_from_env(cls, prefix: str = "APP_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for MyConfig(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass(frozen=True)
class EventsConfig:
    """Dispatcher settings. EventsModule picks it up from the container when registered."""

    wildcard: str = "*"
    flush_suffix: str = "_flushed"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.wildcard:
            raise ValueError("wildcard token must be a non-empty string")


def load_config_from_env(prefix: str = "HERALD_", **defaults: Any) -> EventsConfig:
    """Build EventsConfig from HERALD_WILDCARD, HERALD_FLUSH_SUFFIX, HERALD_LOG_LEVEL. Unknown keys are ignored."""
    values = Config.load_from_env(prefix=prefix, **defaults)
    known = {f.name for f in fields(EventsConfig)}
    return EventsConfig(**{k: v for k, v in values.items() if k in known})
