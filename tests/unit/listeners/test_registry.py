"""Tests for ListenerRegistry."""

import pytest

from spec_lifecycle.listeners.base import TestListener
from spec_lifecycle.listeners.errors import DuplicateListenerError, RegistryClosedError
from spec_lifecycle.listeners.registry import ListenerRegistry
from spec_lifecycle.testing.recording import RecordingListener


def test_preserves_registration_order() -> None:
    """Listeners are kept in the order they were registered."""
    first, second = RecordingListener(), RecordingListener()
    registry = ListenerRegistry()

    registry.register(first)
    registry.register(second)

    assert registry.listeners == (first, second)
    assert len(registry) == 2


def test_rejects_duplicate_instance() -> None:
    """The same instance cannot be registered twice."""
    listener = RecordingListener()
    registry = ListenerRegistry()
    registry.register(listener)

    with pytest.raises(DuplicateListenerError):
        registry.register(listener)


def test_rejects_non_listener() -> None:
    """Only TestListener instances are accepted."""
    with pytest.raises(TypeError, match="must be a TestListener"):
        ListenerRegistry().register(object())  # type: ignore[arg-type]


def test_run_brackets_with_project_events() -> None:
    """run() fires project_started on entry and project_finished on exit."""
    recorder = RecordingListener()
    registry = ListenerRegistry()
    registry.register(recorder)

    with registry.run() as dispatcher:
        assert recorder.names == ["project_started"]
        dispatcher.after_discovery([])

    assert recorder.names == ["project_started", "after_discovery", "project_finished"]


def test_run_finishes_project_when_body_raises() -> None:
    """project_finished fires even when the engine fails mid-run."""
    recorder = RecordingListener()
    registry = ListenerRegistry()
    registry.register(recorder)

    with pytest.raises(RuntimeError, match="engine crashed"), registry.run():
        raise RuntimeError("engine crashed")

    assert recorder.names == ["project_started", "project_finished"]


def test_closed_after_run_starts() -> None:
    """Registration and a second run are refused once a run started."""
    registry = ListenerRegistry()

    with registry.run():
        assert registry.closed
        with pytest.raises(RegistryClosedError):
            registry.register(TestListener())

    with pytest.raises(RegistryClosedError), registry.run():
        pass  # pragma: no cover


def test_dispatcher_snapshot_is_immutable() -> None:
    """The dispatcher keeps the listeners present when the run started."""
    recorder = RecordingListener()
    registry = ListenerRegistry()
    registry.register(recorder)

    with registry.run() as dispatcher:
        assert dispatcher.listeners == (recorder,)
