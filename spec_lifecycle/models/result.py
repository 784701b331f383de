"""Models for test case outcomes."""

from dataclasses import dataclass
from typing import Literal, Self


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Outcome of a single test case execution attempt.

    Failures are expectations that were not met, errors are anything else the
    test raised. Only those two statuses may carry a cause.
    """

    __test__ = False

    status: Literal["success", "failure", "error", "ignored"]
    cause: BaseException | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.cause is not None and self.status in {"success", "ignored"}:
            raise ValueError(f"a {self.status} result cannot carry a cause")

    @classmethod
    def success(cls) -> Self:
        return cls(status="success")

    @classmethod
    def failure(cls, cause: BaseException | None = None) -> Self:
        return cls(status="failure", cause=cause)

    @classmethod
    def error(cls, cause: BaseException | None = None) -> Self:
        return cls(status="error", cause=cause)

    @classmethod
    def ignored(cls, reason: str | None = None) -> Self:
        return cls(status="ignored", reason=reason)

    @property
    def is_success(self) -> bool:
        return self.status == "success"
