from herald.core.app import Application
from herald.core.container import Container
from herald.core.module import Module
from herald.core.config import Config, EventsConfig, load_config_from_env

__all__ = [
    "Application",
    "Container",
    "Module",
    "Config",
    "EventsConfig",
    "load_config_from_env",
]
