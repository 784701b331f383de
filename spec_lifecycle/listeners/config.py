"""Configuration of the listeners attached to a run."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Self

from pydantic import BaseModel, Field, model_validator

from spec_lifecycle.listeners.base import TestListener
from spec_lifecycle.listeners.loading import load_listener
from spec_lifecycle.listeners.registry import ListenerRegistry


class ListenerConfig(BaseModel):
    """Listener plugins to load for a run, in dispatch order."""

    listeners: Sequence[str] = Field(
        default_factory=list, description="Entry point keys of listener plugins"
    )
    options: Mapping[str, Mapping[str, Any]] = Field(
        default_factory=dict,
        description="Keyword arguments for each plugin, by key",
    )

    @model_validator(mode="after")
    def _options_match_listeners(self) -> Self:
        unknown = sorted(set(self.options) - set(self.listeners))
        if unknown:
            raise ValueError(f"options given for unconfigured listeners: {unknown}")
        return self


def build_registry(
    config: ListenerConfig, extra: Iterable[TestListener] = ()
) -> ListenerRegistry:
    """Create a registry with the configured plugins followed by ``extra``."""
    registry = ListenerRegistry()

    for key in config.listeners:
        registry.register(load_listener(key, **config.options.get(key, {})))

    for listener in extra:
        registry.register(listener)

    return registry
