"""
CLI: make-listener, make-subscriber, make-event, listeners.
Generated listeners and subscribers are registered via events.listen / events.subscribe.
"""
import importlib
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from herald.cli import templates as T
from herald.core.app import Application
from herald.core.config import load_config_from_env
from herald.domain.observable import snake_case
from herald.events.dispatcher import EventDispatcher

app = typer.Typer(help="Herald CLI: scaffold listeners, subscribers and events; inspect a dispatcher.")


def _check_name(name: str) -> None:
    if not name.isidentifier() or not name[0].isupper():
        typer.echo(f"Name must be a PascalCase identifier, got «{name}»", err=True)
        raise typer.Exit(1)


def _write(directory: Path, name: str, template: str, force: bool) -> None:
    _check_name(name)
    directory.mkdir(parents=True, exist_ok=True)
    snake = snake_case(name)
    path = directory / f"{snake}.py"
    if path.exists() and not force:
        typer.echo(f"{path.name} already exists, skipped. Use --force to overwrite.")
        return
    path.write_text(template.format(name=name, snake=snake), encoding="utf-8")
    typer.echo(f"Created: {path}")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    level = "DEBUG" if verbose else load_config_from_env().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def make_listener(
    name: str = typer.Argument(..., help="Listener class name (PascalCase, e.g. SendWelcomeEmail)"),
    directory: Path = typer.Option(Path("listeners"), "--dir", "-d", help="Target directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing file"),
) -> None:
    """Create a listener class with a handle method."""
    _write(directory, name, T.LISTENER_PY, force)


@app.command()
def make_subscriber(
    name: str = typer.Argument(..., help="Subscriber class name (PascalCase, e.g. UserEventSubscriber)"),
    directory: Path = typer.Option(Path("listeners"), "--dir", "-d", help="Target directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing file"),
) -> None:
    """Create a subscriber class with a subscribe(events) method."""
    _write(directory, name, T.SUBSCRIBER_PY, force)


@app.command()
def make_event(
    name: str = typer.Argument(..., help="Event class name (PascalCase, e.g. OrderShipped)"),
    directory: Path = typer.Option(Path("events"), "--dir", "-d", help="Target directory"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing file"),
) -> None:
    """Create a DomainEvent dataclass."""
    _write(directory, name, T.EVENT_PY, force)


def _load_dispatcher(target: str) -> EventDispatcher:
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise typer.BadParameter("expected module:attribute", param_hint="TARGET")
    if "" not in sys.path:
        sys.path.insert(0, "")
    obj: Any = importlib.import_module(module_name)
    for part in attr.split("."):
        obj = getattr(obj, part)
    if isinstance(obj, Application):
        obj = obj.events
    if not isinstance(obj, EventDispatcher):
        raise typer.BadParameter(f"{target} is neither an EventDispatcher nor an Application", param_hint="TARGET")
    return obj


@app.command()
def listeners(
    target: str = typer.Argument(..., help="module:attribute of an EventDispatcher or Application"),
    event: Optional[str] = typer.Option(None, "--event", "-e", help="Show the listeners one event name resolves to"),
) -> None:
    """List registered events and patterns, or the listeners for one event in call order."""
    dispatcher = _load_dispatcher(target)
    registry = dispatcher.registry
    if event is not None:
        resolved = dispatcher.get_listeners(event)
        if not resolved:
            typer.echo(f"No listeners for «{event}»")
            return
        for i, listener in enumerate(resolved, 1):
            source = f" (via {listener.pattern})" if listener.wildcard else ""
            typer.echo(f"{i}. {listener.name} [{listener.kind.value}]{source}")
        return
    for name in registry.events():
        typer.echo(f"{name}: {len(registry.get_listeners(name))} listener(s)")
    for pattern in registry.patterns():
        typer.echo(f"{pattern} (wildcard)")


def main() -> None:
    """Entry point for the herald console command."""
    app()


if __name__ == "__main__":
    main()
