"""Lifecycle listener contract, dispatch and registration."""

from spec_lifecycle.listeners.base import Spec, TestListener
from spec_lifecycle.listeners.config import ListenerConfig, build_registry
from spec_lifecycle.listeners.dispatcher import ListenerDispatcher, ListenerFailure
from spec_lifecycle.listeners.registry import ListenerRegistry

__all__ = [
    "ListenerConfig",
    "ListenerDispatcher",
    "ListenerFailure",
    "ListenerRegistry",
    "Spec",
    "TestListener",
    "build_registry",
]
