"""Hierarchical identifiers for the project, specs and test cases."""

from collections.abc import Sequence
from typing import Self

from pydantic import Field, field_validator

from spec_lifecycle.models.base import Model


class Description(Model):
    """Path identifying a node of the test tree.

    The empty path is the project root, a single segment names a spec and
    anything deeper is a test case nested under that spec.
    """

    parts: tuple[str, ...] = Field(
        default=(), description="Path segments from the project root"
    )

    @field_validator("parts")
    @classmethod
    def _segments_not_empty(cls, parts: tuple[str, ...]) -> tuple[str, ...]:
        if any(not part for part in parts):
            raise ValueError("description segments must be non-empty strings")
        return parts

    @classmethod
    def project(cls) -> Self:
        """Return the project root description."""
        return cls(parts=())

    @classmethod
    def spec(cls, name: str) -> Self:
        """Return the root description of the spec called ``name``."""
        return cls(parts=(name,))

    @classmethod
    def of(cls, names: Sequence[str]) -> Self:
        """Build a description from a sequence of segment names.

        Raises:
            TypeError: If ``names`` is a single string

        """
        if isinstance(names, str):
            raise TypeError(
                f"Expected a sequence of segment names, got the string {names!r}"
            )
        return cls(parts=tuple(names))

    def append(self, name: str) -> Self:
        """Return the description of a child node."""
        return type(self)(parts=(*self.parts, name))

    @property
    def name(self) -> str:
        return self.parts[-1] if self.parts else ""

    @property
    def depth(self) -> int:
        return len(self.parts)

    @property
    def parent(self) -> Self | None:
        if not self.parts:
            return None
        return type(self)(parts=self.parts[:-1])

    @property
    def is_project(self) -> bool:
        return not self.parts

    @property
    def is_spec(self) -> bool:
        return len(self.parts) == 1

    @property
    def is_test_case(self) -> bool:
        return len(self.parts) > 1

    def spec_description(self) -> Self:
        """Return the enclosing spec description.

        Raises:
            ValueError: If called on the project root

        """
        if not self.parts:
            raise ValueError("the project root has no enclosing spec")
        return type(self)(parts=self.parts[:1])

    def is_ancestor_of(self, other: "Description") -> bool:
        """Check whether this path is a strict prefix of ``other``."""
        return (
            len(self.parts) < len(other.parts)
            and other.parts[: len(self.parts)] == self.parts
        )

    def is_descendant_of(self, other: "Description") -> bool:
        return other.is_ancestor_of(self)

    def full_name(self, separator: str = " ") -> str:
        return separator.join(self.parts)

    def __str__(self) -> str:
        return self.full_name()
