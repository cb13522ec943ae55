"""Assertion layer: raise descriptive errors for ill-typed values.

Thin wrappers over :class:`~offspring.domain.predicates.TypeChecker`.
Both return the checked value unchanged so they can be used inline::

    self.width = assert_type(checker, width, "number", "width")
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TypeVar

from offspring.domain.errors import ArgumentError, TypeMismatchError

if TYPE_CHECKING:
    from offspring.domain.predicates import TypeChecker

T = TypeVar("T")


def caller_location(depth: int) -> str | None:
    """Describe the frame *depth* levels above the function calling this one.

    ``depth=0`` is that function itself, ``depth=1`` its caller.
    Returns None when the stack is not that deep.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    code = frame.f_code
    return f"{code.co_filename}:{frame.f_lineno} in {code.co_name}"


def assert_type(
    checker: TypeChecker,
    value: T,
    expected: str,
    label: str | None = None,
    depth: int = 1,
) -> T:
    """Return *value* if it satisfies *expected*, else raise.

    Args:
        checker: The type checker to consult.
        value: The value to check.
        expected: A type name or union expression, e.g. ``"string|number"``.
        label: How to name the value in the error message.
        depth: Which frame the error is attributed to; 1 is the caller.

    Raises:
        TypeMismatchError: The value does not satisfy *expected*.
    """
    if checker.type_of(value, expected):
        return value

    actual = checker.type_name(value)
    subject = f" of {label}" if label else ""
    msg = f"The type{subject} should be '{expected}' but was '{actual}'"
    raise TypeMismatchError(
        msg,
        expected=expected,
        actual=actual,
        label=label,
        location=caller_location(depth),
    )


def assert_argument(
    checker: TypeChecker,
    index: int,
    value: T,
    expected: str,
    depth: int = 2,
) -> T:
    """Return argument *value* if it satisfies *expected*, else raise.

    The error is attributed to the caller of the function performing the
    check, one frame further out than :func:`assert_type`.

    Raises:
        ArgumentError: The argument does not satisfy *expected*.
    """
    if checker.type_of(value, expected):
        return value

    actual = checker.type_name(value)
    msg = (
        f"The type of argument #{index} was expected to be '{expected}' but was '{actual}'"
    )
    raise ArgumentError(
        msg,
        index=index,
        expected=expected,
        actual=actual,
        location=caller_location(depth),
    )

