"""Listener contract for test lifecycle notifications."""

from collections.abc import Sequence

from spec_lifecycle.models.description import Description
from spec_lifecycle.models.result import TestResult

# Specs are user-defined containers; listeners only receive them.
type Spec = object


class TestListener:
    """Observer of lifecycle events raised by a test engine.

    Every callback is a no-op, so implementations override only the events
    they care about. For any single listener the engine guarantees:

    - ``project_started`` precedes ``after_discovery``, which precedes every
      ``spec_started``.
    - For a spec instance, ``spec_started`` precedes every ``test_started``
      under it and ``spec_finished`` follows every ``test_finished`` under it.
    - ``test_started`` precedes the matching ``test_finished``, which fires
      exactly once per attempt, ignored tests included.
    - ``project_finished`` follows every ``spec_finished``.

    Specs running concurrently may interleave in any order.
    """

    __test__ = False

    def test_started(self, description: Description) -> None:
        """Invoked each time a test case starts executing.

        Args:
            description: Description of the test case

        """

    def test_finished(self, description: Description, result: TestResult) -> None:
        """Invoked when a test case has finished, was ignored, failed or errored.

        Args:
            description: Description of the test case
            result: Outcome of the test case

        """

    def spec_started(self, description: Description, spec: Spec) -> None:
        """Invoked each time a spec starts.

        When a spec runs with one instance per test case this fires once per
        instance.

        Args:
            description: Root description of the spec
            spec: The spec instance

        """

    def spec_finished(self, description: Description, spec: Spec) -> None:
        """Invoked each time a spec completes, once per instance."""

    def project_started(self) -> None:
        """Invoked once, as soon as the engine starts."""

    def project_finished(self) -> None:
        """Invoked once, after everything else."""

    def after_discovery(self, descriptions: Sequence[Description]) -> None:
        """Invoked once all specs are discovered, before any of them starts.

        Args:
            descriptions: Root description of every discovered spec

        """
