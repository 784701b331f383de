"""Listener that checks the lifecycle ordering guarantees."""

import logging
from collections import Counter
from collections.abc import Sequence
from threading import Lock

from spec_lifecycle.listeners.base import Spec, TestListener
from spec_lifecycle.listeners.errors import LifecycleOrderError
from spec_lifecycle.models.description import Description
from spec_lifecycle.models.result import TestResult

log = logging.getLogger(__name__)


class LifecycleOrderChecker(TestListener):
    """Records every event that breaks the per-listener ordering guarantees.

    Spec instances are tracked individually, so a spec run with one instance
    per test case may be started several times. Interleaving between
    different specs is never reported.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.violations: list[str] = []
        self._lock = Lock()
        self._project_started = False
        self._project_finished = False
        self._discovered = False
        self._open_specs: Counter[tuple[Description, int]] = Counter()
        self._open_tests: Counter[Description] = Counter()

    def project_started(self) -> None:
        with self._lock:
            if self._project_started:
                self._violation("project_started fired more than once")
            self._project_started = True

    def after_discovery(self, descriptions: Sequence[Description]) -> None:
        with self._lock:
            if not self._project_started:
                self._violation("after_discovery fired before project_started")
            if self._discovered:
                self._violation("after_discovery fired more than once")
            self._discovered = True

    def spec_started(self, description: Description, spec: Spec) -> None:
        with self._lock:
            if not self._discovered:
                self._violation(f"spec_started({description}) before after_discovery")
            if self._project_finished:
                self._violation(f"spec_started({description}) after project_finished")
            self._open_specs[(description, id(spec))] += 1

    def test_started(self, description: Description) -> None:
        with self._lock:
            if self._project_finished:
                self._violation(f"test_started({description}) after project_finished")
            spec = description.spec_description()
            if not any(key[0] == spec for key in self._open_specs):
                self._violation(f"test_started({description}) outside spec {spec}")
            self._open_tests[description] += 1

    def test_finished(self, description: Description, result: TestResult) -> None:
        with self._lock:
            if self._project_finished:
                self._violation(f"test_finished({description}) after project_finished")
            if self._open_tests[description] <= 0:
                self._violation(f"test_finished({description}) without test_started")
                return
            _release(self._open_tests, description)

    def spec_finished(self, description: Description, spec: Spec) -> None:
        with self._lock:
            key = (description, id(spec))
            if self._open_specs[key] <= 0:
                self._violation(f"spec_finished({description}) without spec_started")
                return
            _release(self._open_specs, key)

            other_instances = any(
                open_description == description
                for open_description, _ in self._open_specs
            )
            running = [
                test for test in self._open_tests if test.is_descendant_of(description)
            ]
            if running and not other_instances:
                self._violation(
                    f"spec_finished({description}) before tests finished: "
                    + ", ".join(str(test) for test in running)
                )

    def project_finished(self) -> None:
        with self._lock:
            if self._project_finished:
                self._violation("project_finished fired more than once")
            if self._open_specs:
                self._violation("project_finished fired while specs were running")
            if self._open_tests:
                self._violation("project_finished fired while tests were running")
            self._project_finished = True

    def _violation(self, message: str) -> None:
        log.warning("Lifecycle order violation: %s", message)
        self.violations.append(message)
        if self.strict:
            raise LifecycleOrderError(message)


def _release[K](open_counts: Counter[K], key: K) -> None:
    """Decrement an open count, dropping the key once it reaches zero."""
    open_counts[key] -= 1
    if open_counts[key] <= 0:
        del open_counts[key]
