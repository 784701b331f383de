"""Exact-type exception assertions."""

from spec_lifecycle.assertions.errors import NoFailureThrownError, WrongFailureTypeError
from spec_lifecycle.assertions.exact import (
    should_throw_exactly,
    should_throw_exactly_unit,
    throws_exactly,
)

__all__ = [
    "NoFailureThrownError",
    "WrongFailureTypeError",
    "should_throw_exactly",
    "should_throw_exactly_unit",
    "throws_exactly",
]
