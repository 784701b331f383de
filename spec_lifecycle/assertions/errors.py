"""Failures reported by the exact-type assertion engine."""


def qualified_name(cls: type) -> str:
    """Return the dotted name of a class, without the ``builtins`` prefix."""
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class NoFailureThrownError(AssertionError):
    """Raised when a block expected to fail completed normally."""

    def __init__(self, expected: type[BaseException]) -> None:
        super().__init__(
            f"Expected exception {qualified_name(expected)} "
            "but no exception was thrown."
        )
        self.expected = expected


class WrongFailureTypeError(AssertionError):
    """Raised when a block failed with something other than the exact type."""

    def __init__(self, expected: type[BaseException], actual: BaseException) -> None:
        super().__init__(
            f"Expected exception {qualified_name(expected)} "
            f"but a {type(actual).__name__} was thrown instead."
        )
        self.expected = expected
        self.actual = actual
