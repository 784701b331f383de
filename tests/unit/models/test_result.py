"""Tests for TestResult."""

import pytest

from spec_lifecycle.models.result import TestResult
from spec_lifecycle.testing.factories import TestResultFactory


def test_success_has_no_cause() -> None:
    """Success results carry neither cause nor reason."""
    result = TestResult.success()

    assert result.status == "success"
    assert result.is_success
    assert result.cause is None


@pytest.mark.parametrize("status", ["failure", "error"])
def test_failures_carry_cause(status: str) -> None:
    """Failure and error results keep the exact cause instance."""
    cause = RuntimeError("boom")

    result = getattr(TestResult, status)(cause)

    assert result.status == status
    assert result.cause is cause
    assert not result.is_success


def test_ignored_carries_reason() -> None:
    """Ignored results keep the reason."""
    result = TestResult.ignored("disabled on CI")

    assert result.status == "ignored"
    assert result.reason == "disabled on CI"


@pytest.mark.parametrize("status", ["success", "ignored"])
def test_rejects_cause_on_non_failures(status: str) -> None:
    """Success and ignored results cannot carry a cause."""
    with pytest.raises(ValueError, match="cannot carry a cause"):
        TestResult(status=status, cause=RuntimeError())  # type: ignore[arg-type]


def test_is_immutable() -> None:
    """Results cannot be modified after creation."""
    result = TestResultFactory.build()

    with pytest.raises(AttributeError):
        result.status = "failure"  # type: ignore[misc]
