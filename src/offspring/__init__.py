"""offspring: class and type checking utilities.

Static multiple inheritance by field copying, closed enums, and a
unified ``type_of``/``type_name`` query over native values, foreign
objects, offspring classes, and enums, with ``"a|b"`` union expressions.

The functions below operate on the process-wide
:class:`~offspring.system.TypeSystem`. Create a ``TypeSystem`` of your own
for isolated registries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from offspring.domain import assertions
from offspring.domain.classes import BASE_TYPE_NAME, ClassDescriptor, Object
from offspring.domain.enums import FrozenEnum
from offspring.domain.errors import (
    ArgumentError,
    DuplicateDefinitionError,
    EnumAccessError,
    OffspringError,
    TypeMismatchError,
)
from offspring.system import TypeSystem, get_default_system

__version__ = "1.0.0"

T = TypeVar("T")


def define_class(name: str, *parents: ClassDescriptor) -> ClassDescriptor:
    """Create a class by statically copying *parents* (default: ``Object``)."""
    return get_default_system().define_class(name, *parents, depth=2)


def define_enum(name: str, members: Mapping[str, Any]) -> FrozenEnum:
    """Register a closed enum; raises DuplicateDefinitionError on reuse of *name*."""
    return get_default_system().define_enum(name, members)


def type_name(value: Any) -> str:
    """Return the type name of *value*.

    Instances report their class's type name; a class object itself is ``"class"``.
    """
    return get_default_system().type_name(value)


def type_of(value: Any, expression: str) -> bool:
    """Whether *value* satisfies the union type *expression*, e.g. ``"string|number"``."""
    return get_default_system().type_of(value, expression)


def assert_type(value: T, expected: str, label: str | None = None, depth: int = 1) -> T:
    """Return *value* unchanged, or raise TypeMismatchError."""
    return assertions.assert_type(get_default_system().checker, value, expected, label, depth + 1)


def assert_argument(index: int, value: T, expected: str) -> T:
    """Return argument *value* unchanged, or raise ArgumentError naming argument *index*."""
    return assertions.assert_argument(get_default_system().checker, index, value, expected, depth=3)


def excluded_fields() -> set[str]:
    """The process-wide set of namespace keys never copied during inheritance."""
    return get_default_system().excluded_fields


__all__ = [
    "BASE_TYPE_NAME",
    "ArgumentError",
    "ClassDescriptor",
    "DuplicateDefinitionError",
    "EnumAccessError",
    "FrozenEnum",
    "Object",
    "OffspringError",
    "TypeMismatchError",
    "TypeSystem",
    "assert_argument",
    "assert_type",
    "define_class",
    "define_enum",
    "excluded_fields",
    "get_default_system",
    "type_name",
    "type_of",
]
