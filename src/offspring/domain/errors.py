"""Exception taxonomy for offspring.

Every error is raised synchronously to the immediate caller. The
builtin base classes keep ``except TypeError`` / ``except LookupError``
call sites in embedding applications working unchanged.
"""

from __future__ import annotations


class OffspringError(Exception):
    """Base class for every error raised by offspring."""


class ArgumentError(OffspringError, TypeError):
    """Malformed input to a definition or assertion function.

    Attributes:
        index: 1-based index of the offending argument, if known.
        expected: The expected type expression, if the failure was a type check.
        actual: The observed type name, if the failure was a type check.
        location: ``"path:lineno in function"`` of the attributed caller frame.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        expected: str | None = None,
        actual: str | None = None,
        location: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.expected = expected
        self.actual = actual
        self.location = location


class TypeMismatchError(OffspringError, TypeError):
    """A checked value does not satisfy the expected type expression."""

    def __init__(
        self,
        message: str,
        *,
        expected: str,
        actual: str,
        label: str | None = None,
        location: str | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.label = label
        self.location = location


class DuplicateDefinitionError(OffspringError, ValueError):
    """An enum name is registered twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Enum {name} is already defined!")
        self.name = name


class EnumAccessError(OffspringError, KeyError, AttributeError):
    """Reading a missing key, or writing any key, on a frozen enum.

    Members are readable both as items and as attributes, so the error is
    both a ``KeyError`` and an ``AttributeError``.
    """

    def __init__(self, message: str, *, enum_name: str, key: object) -> None:
        super().__init__(message)
        self.enum_name = enum_name
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
