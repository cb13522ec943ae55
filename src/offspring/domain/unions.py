"""Union type expressions.

A union expression is one or more type names joined by a delimiter,
e.g. ``"string|number"``. Parsing is permissive: a leading or doubled
delimiter produces an empty alternative that matches nothing, and a
trailing delimiter is ignored. Neither raises.
"""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_DELIMITER = "|"


def split_first(text: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str]:
    """Split *text* at the first occurrence of *delimiter*.

    Returns:
        A ``(first, rest)`` tuple. If the delimiter is not found, returns
        ``(text, "")``.
    """
    first, found, rest = text.partition(delimiter)
    if not found:
        return text, ""
    return first, rest


def iter_alternatives(expression: str, delimiter: str = DEFAULT_DELIMITER) -> Iterator[str]:
    """Yield the alternatives of a union expression from left to right.

    The generator is lazy so callers can stop at the first match. Once
    the remainder is empty iteration stops, so ``"a|"`` yields only
    ``"a"`` while ``"|a"`` yields ``""`` then ``"a"``.
    """
    remaining = expression
    while True:
        first, remaining = split_first(remaining, delimiter)
        yield first
        if remaining == "":
            return
