"""Native type categories.

Every Python value belongs to exactly one category. Categories are the
names matched first by :func:`offspring.type_of` and returned by
:func:`offspring.type_name` for values that do not report a type of
their own.
"""

from __future__ import annotations

import inspect
import numbers
from collections.abc import Mapping, Sequence, Set
from typing import Any

NIL = "nil"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
BYTES = "bytes"
CLASS = "class"
FUNCTION = "function"
TABLE = "table"
OBJECT = "object"

NATIVE_CATEGORIES: tuple[str, ...] = (
    NIL,
    BOOLEAN,
    NUMBER,
    STRING,
    BYTES,
    CLASS,
    FUNCTION,
    TABLE,
    OBJECT,
)

# Only these categories are asked about the type()/type_of() capabilities.
COMPOSITE_CATEGORIES: frozenset[str] = frozenset({TABLE, OBJECT})


def native_type_name(value: Any) -> str:
    """Return the native category name of *value*."""
    if value is None:
        return NIL
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, numbers.Number):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BYTES
    if isinstance(value, type):  # offspring classes included; instances carry the type name
        return CLASS
    if inspect.isroutine(value):
        return FUNCTION
    if isinstance(value, (Mapping, Sequence, Set)):
        return TABLE
    return OBJECT


def is_composite(value: Any) -> bool:
    """Whether *value* may carry its own type capabilities."""
    return native_type_name(value) in COMPOSITE_CATEGORIES
