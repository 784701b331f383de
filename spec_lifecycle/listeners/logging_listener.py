"""Listener that writes lifecycle events to the log."""

import logging
from collections.abc import Sequence

from spec_lifecycle.listeners.base import Spec, TestListener
from spec_lifecycle.models.description import Description
from spec_lifecycle.models.result import TestResult

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
    "ignored": "⏭️",
}


class LoggingListener(TestListener):
    """Logs every lifecycle event on the ``spec_lifecycle.events`` logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.log = logger or logging.getLogger("spec_lifecycle.events")

    def project_started(self) -> None:
        self.log.info("Project started")

    def after_discovery(self, descriptions: Sequence[Description]) -> None:
        self.log.info("Discovered %d spec(s)", len(descriptions))
        for description in descriptions:
            self.log.debug("  %s", description)

    def spec_started(self, description: Description, spec: Spec) -> None:
        self.log.info("Spec started: %s", description)

    def test_started(self, description: Description) -> None:
        self.log.info("Test started: %s", description)

    def test_finished(self, description: Description, result: TestResult) -> None:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        level = logging.INFO if result.status == "success" else logging.WARNING
        self.log.log(level, "%s %s: %s", symbol, description, result.status)
        if result.cause is not None:
            self.log.log(level, "  Cause: %r", result.cause)
        if result.reason:
            self.log.log(level, "  Reason: %s", result.reason)

    def spec_finished(self, description: Description, spec: Spec) -> None:
        self.log.info("Spec finished: %s", description)

    def project_finished(self) -> None:
        self.log.info("Project finished")
