"""Fan-out of lifecycle events to registered listeners."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from spec_lifecycle.listeners.base import Spec, TestListener
from spec_lifecycle.models.description import Description
from spec_lifecycle.models.result import TestResult

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ListenerFailure:
    """A listener raised while handling an event."""

    listener: TestListener
    event: str
    error: Exception


@dataclass(frozen=True, kw_only=True)
class ListenerDispatcher(TestListener):
    """Delivers each event to every listener in registration order.

    A listener that raises never stops delivery to the listeners after it,
    nor to later events: the error is logged and handed to ``on_failure``.
    The listener tuple is immutable, so engines may dispatch from several
    threads at once.
    """

    listeners: tuple[TestListener, ...] = ()
    on_failure: Callable[[ListenerFailure], None] | None = None

    def test_started(self, description: Description) -> None:
        self._notify("test_started", description)

    def test_finished(self, description: Description, result: TestResult) -> None:
        self._notify("test_finished", description, result)

    def spec_started(self, description: Description, spec: Spec) -> None:
        self._notify("spec_started", description, spec)

    def spec_finished(self, description: Description, spec: Spec) -> None:
        self._notify("spec_finished", description, spec)

    def project_started(self) -> None:
        self._notify("project_started")

    def project_finished(self) -> None:
        self._notify("project_finished")

    def after_discovery(self, descriptions: Sequence[Description]) -> None:
        self._notify("after_discovery", tuple(descriptions))

    def _notify(self, event: str, *args: Any) -> None:
        """Invoke ``event`` on every listener, isolating their failures."""
        for listener in self.listeners:
            try:
                getattr(listener, event)(*args)
            except Exception as exc:
                log.error(
                    "Listener %s failed on %s: %s",
                    type(listener).__qualname__,
                    event,
                    exc,
                    exc_info=exc,
                )
                self._report(ListenerFailure(listener=listener, event=event, error=exc))

    def _report(self, failure: ListenerFailure) -> None:
        if self.on_failure is None:
            return
        try:
            self.on_failure(failure)
        except Exception as exc:
            log.error("Listener failure hook raised: %s", exc, exc_info=exc)
