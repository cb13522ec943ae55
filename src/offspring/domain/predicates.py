"""Type predicate core: membership of a value in a type expression.

Each alternative of a union expression is matched against the value
through an ordered sequence of checks, first match wins:

1. the native category of the value equals the name;
2. the value is composite and exposes a callable ``type_of(name)``, in
   which case its answer is final;
3. the name is a registered enum and the value equals one of its members.

Alternatives are tried left to right and the first success ends the
search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from offspring.domain.errors import ArgumentError
from offspring.domain.natives import is_composite, native_type_name
from offspring.domain.unions import DEFAULT_DELIMITER, iter_alternatives

if TYPE_CHECKING:
    from offspring.domain.enums import EnumRegistry


class TypeChecker:
    """Answers ``type_of`` and ``type_name`` queries against one enum registry."""

    def __init__(self, enums: EnumRegistry, *, delimiter: str = DEFAULT_DELIMITER) -> None:
        if not delimiter:
            msg = "Union delimiter must not be empty"
            raise ValueError(msg)
        self._enums = enums
        self._delimiter = delimiter

    @property
    def delimiter(self) -> str:
        return self._delimiter

    def type_name(self, value: Any) -> str:
        """Return the type name of *value*.

        Composite values that expose a callable ``type()`` report their own
        name; everything else reports its native category. An offspring
        class object is not composite: ``type_name(Shape)`` is ``"class"``
        and ``type_of(Shape, "Shape")`` is false. Only instances report
        ``"Shape"``.
        """
        if is_composite(value):
            reporter = getattr(value, "type", None)
            if callable(reporter):
                return str(reporter())
        return native_type_name(value)

    def type_of(self, value: Any, expression: str) -> bool:
        """Whether *value* satisfies any alternative of *expression*."""
        return self.match(value, expression) is not None

    def match(self, value: Any, expression: str) -> str | None:
        """Return the first alternative of *expression* that *value* satisfies.

        Returns None when no alternative matches.
        """
        if not isinstance(expression, str):
            actual = native_type_name(expression)
            msg = f"The type of argument #2 was expected to be 'string' but was '{actual}'"
            raise ArgumentError(msg, index=2, expected="string", actual=actual)
        for name in iter_alternatives(expression, self._delimiter):
            if self._matches(value, name):
                return name
        return None

    def _matches(self, value: Any, name: str) -> bool:
        if native_type_name(value) == name:
            return True

        if is_composite(value):
            delegate = getattr(value, "type_of", None)
            if callable(delegate):
                return bool(delegate(name))

        return self._enums.contains_value(name, value)
