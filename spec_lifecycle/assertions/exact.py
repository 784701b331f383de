"""Assertions that a block raises exactly a given exception type.

Subclasses of the expected type do not match: expecting ``OSError`` when the
block raises ``FileNotFoundError`` fails.

```
    thrown = should_throw_exactly(FooError, lambda: parse("bad"))

    with throws_exactly(FooError) as captured:
        config.value = "bad"
    assert captured.value.args == ("bad",)
```
"""

from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Self

from spec_lifecycle.assertions.errors import NoFailureThrownError, WrongFailureTypeError


@dataclass(frozen=True, kw_only=True)
class Matched[E: BaseException]:
    """The block raised exactly the expected type."""

    value: E


@dataclass(frozen=True, kw_only=True)
class NothingThrown:
    """The block completed without raising."""

    expected: type[BaseException]


@dataclass(frozen=True, kw_only=True)
class Passthrough:
    """The block raised an assertion failure that must propagate untouched."""

    value: AssertionError


@dataclass(frozen=True, kw_only=True)
class WrongType:
    """The block raised something other than the exact expected type."""

    expected: type[BaseException]
    value: BaseException


type ExactTypeOutcome[E: BaseException] = (
    Matched[E] | NothingThrown | Passthrough | WrongType
)


def _check_expected(expected: Any) -> None:
    if not (isinstance(expected, type) and issubclass(expected, BaseException)):
        raise TypeError(f"Expected an exception class, got {expected!r}")


def _classify[E: BaseException](
    expected: type[E], thrown: BaseException | None
) -> ExactTypeOutcome[E]:
    if thrown is None:
        return NothingThrown(expected=expected)
    # Exact match wins over the passthrough so callers can expect
    # AssertionError itself.
    if type(thrown) is expected:
        return Matched(value=thrown)
    if isinstance(thrown, AssertionError):
        return Passthrough(value=thrown)
    return WrongType(expected=expected, value=thrown)


def _resolve[E: BaseException](outcome: ExactTypeOutcome[E]) -> E:
    match outcome:
        case Matched(value=value):
            return value
        case NothingThrown(expected=expected):
            raise NoFailureThrownError(expected)
        case Passthrough(value=value):
            raise value
        case WrongType(expected=expected, value=value):
            raise WrongFailureTypeError(expected, value) from value


def classify_exact[E: BaseException](
    expected: type[E], block: Callable[[], object]
) -> ExactTypeOutcome[E]:
    """Run ``block`` once and classify what it raised against ``expected``.

    Args:
        expected: Exception class the block must raise, subclasses excluded
        block: Zero-argument callable to run

    Returns:
        The outcome, without raising any assertion failure

    """
    _check_expected(expected)
    try:
        block()
    except BaseException as thrown:
        return _classify(expected, thrown)
    return _classify(expected, None)


def should_throw_exactly[E: BaseException](
    expected: type[E], block: Callable[[], object]
) -> E:
    """Verify that ``block`` raises exactly ``expected`` and return the instance.

    Raises:
        NoFailureThrownError: If the block completed normally
        WrongFailureTypeError: If the block raised another type, chained from
            the original exception
        AssertionError: Any assertion failure raised by the block, unchanged
            unless ``expected`` is exactly its type
        TypeError: If ``expected`` is not an exception class

    """
    return _resolve(classify_exact(expected, block))


def should_throw_exactly_unit[E: BaseException](
    expected: type[E], block: Callable[[], None]
) -> E:
    """Variant of ``should_throw_exactly`` for blocks that return nothing."""
    return should_throw_exactly(expected, block)


class ExactTypeCapture[E: BaseException]:
    """Context manager returned by ``throws_exactly``.

    The matching exception is suppressed and exposed as ``value``.
    """

    def __init__(self, expected: type[E]) -> None:
        _check_expected(expected)
        self.expected = expected
        self._value: E | None = None

    @property
    def value(self) -> E:
        if self._value is None:
            raise AttributeError("No exception has been captured yet")
        return self._value

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        outcome = _classify(self.expected, exc)
        if isinstance(outcome, Passthrough):
            # Returning False re-raises the original exception as is.
            return False
        self._value = _resolve(outcome)
        return True


def throws_exactly[E: BaseException](expected: type[E]) -> ExactTypeCapture[E]:
    """Verify that the ``with`` body raises exactly ``expected``."""
    return ExactTypeCapture(expected)
