"""Listener double that records the events it receives."""

from collections.abc import Sequence
from threading import Lock
from typing import Any

from spec_lifecycle.listeners.base import Spec, TestListener
from spec_lifecycle.models.description import Description
from spec_lifecycle.models.result import TestResult

type RecordedEvent = tuple[str, tuple[Any, ...]]


class RecordingListener(TestListener):
    """Records every event as ``(event, args)`` in arrival order."""

    def __init__(self) -> None:
        self.events: list[RecordedEvent] = []
        self._lock = Lock()

    @property
    def names(self) -> list[str]:
        return [event for event, _ in self.events]

    def _record(self, event: str, *args: Any) -> None:
        with self._lock:
            self.events.append((event, args))

    def test_started(self, description: Description) -> None:
        self._record("test_started", description)

    def test_finished(self, description: Description, result: TestResult) -> None:
        self._record("test_finished", description, result)

    def spec_started(self, description: Description, spec: Spec) -> None:
        self._record("spec_started", description, spec)

    def spec_finished(self, description: Description, spec: Spec) -> None:
        self._record("spec_finished", description, spec)

    def project_started(self) -> None:
        self._record("project_started")

    def project_finished(self) -> None:
        self._record("project_finished")

    def after_discovery(self, descriptions: Sequence[Description]) -> None:
        self._record("after_discovery", tuple(descriptions))
