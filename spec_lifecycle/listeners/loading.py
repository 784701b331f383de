"""Loading of listener plugins from entry points."""

from importlib.metadata import entry_points
from typing import Any

from spec_lifecycle.listeners.base import TestListener
from spec_lifecycle.listeners.errors import ListenerNotFoundError

ENTRY_POINT_GROUP = "spec_lifecycle.listeners"


def load_listener(key: str, **kwargs: Any) -> TestListener:
    """Load a listener plugin by key and instantiate it.

    Args:
        key: The listener key as registered in pyproject.toml
             (e.g., "logging", "ordering")
        **kwargs: Keyword arguments passed to the listener factory

    Returns:
        A new listener instance

    Raises:
        ListenerNotFoundError: If no listener with the given key is found
        TypeError: If the entry point does not produce a TestListener

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            listener = entry.load()(**kwargs)
            if not isinstance(listener, TestListener):
                raise TypeError(
                    f"Entry point '{key}' produced {type(listener).__name__}, "
                    "not a TestListener"
                )
            return listener

    available = sorted(e.name for e in entries)
    raise ListenerNotFoundError(
        f"Listener '{key}' not found. Available listeners: {available}"
    )
