"""Closed enumerations and the process-scoped enum registry.

An enum is a named mapping from member keys to member values. Once
registered the mapping is closed to structural change: reading a key
that does not exist fails, and writing any key (new or existing) fails.
Member values themselves are not frozen.

Registered enum names double as type names: ``type_of("red", "Color")``
is true when ``"red"`` equals one of the ``Color`` member values.

INVARIANT: An enum name is registered at most once per registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from offspring.domain.errors import ArgumentError, DuplicateDefinitionError, EnumAccessError
from offspring.domain.natives import native_type_name

if TYPE_CHECKING:
    from offspring.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class FrozenEnum(Mapping[str, Any]):
    """Read-only view over the members of a registered enum.

    Members can be read as items (``Color["RED"]``) or as attributes
    (``Color.RED``). Attribute reads yield to the mapping API, so a member
    called ``items`` or ``name`` is only reachable as an item.
    """

    __slots__ = ("_name", "_members")

    def __init__(self, name: str, members: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_members", dict(members))

    @property
    def name(self) -> str:
        """The registered enum name."""
        return self._name

    def __getitem__(self, key: str) -> Any:
        try:
            return self._members[key]
        except KeyError:
            raise EnumAccessError(
                f"Key {key} does not exist in enum {self._name}",
                enum_name=self._name,
                key=key,
            ) from None

    def __getattr__(self, key: str) -> Any:
        # Only reached for names that are not real attributes.
        if key.startswith("_"):
            raise AttributeError(key)
        return self[key]

    def __setitem__(self, key: str, value: Any) -> None:
        raise EnumAccessError(
            f"Attempt to extend enum {self._name} with key {key}",
            enum_name=self._name,
            key=key,
        )

    def __setattr__(self, key: str, value: Any) -> None:
        self[key] = value

    def __delitem__(self, key: str) -> None:
        raise EnumAccessError(
            f"Attempt to remove key {key} from enum {self._name}",
            enum_name=self._name,
            key=key,
        )

    def __delattr__(self, key: str) -> None:
        del self[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, key: object) -> bool:
        return key in self._members

    def __reduce__(self) -> tuple[Any, ...]:
        return (FrozenEnum, (self._name, self._members))

    def __repr__(self) -> str:
        return f"FrozenEnum({self._name!r}, {self._members!r})"

    def has_value(self, value: Any) -> bool:
        """Whether *value* equals some member value of the same native category.

        ``True`` never matches ``1`` and ``0`` never matches ``False``.
        """
        category = native_type_name(value)
        return any(
            native_type_name(member) == category and member == value
            for member in self._members.values()
        )


class EnumRegistry:
    """Mapping from enum name to its frozen member set.

    Write-once per name, readable for the life of the registry. The
    embedding application must serialize calls to :meth:`define`.
    """

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._enums: dict[str, FrozenEnum] = {}
        self._plugins = plugins

    def define(self, name: str, members: Mapping[str, Any]) -> FrozenEnum:
        """Register *members* under *name* and return the frozen view.

        Raises:
            ArgumentError: *name* is not a string or *members* is not a mapping.
            DuplicateDefinitionError: *name* is already registered.
        """
        if not isinstance(name, str):
            msg = f"Enum name must be a string, got {type(name).__name__}"
            raise ArgumentError(msg, index=1, expected="string")
        if not isinstance(members, Mapping):
            msg = f"Enum {name} members must be a mapping, got {type(members).__name__}"
            raise ArgumentError(msg, index=2, expected="table")
        if name in self._enums:
            raise DuplicateDefinitionError(name)

        frozen = FrozenEnum(name, members)
        self._enums[name] = frozen
        logger.debug("Defined enum %s with %d members", name, len(frozen))

        if self._plugins is not None:
            self._plugins.hook.enum_defined(name=name, members=frozen)
        return frozen

    def get(self, name: str) -> FrozenEnum | None:
        """Return the enum registered under *name*, if any."""
        return self._enums.get(name)

    def names(self) -> list[str]:
        """Registered enum names in registration order."""
        return list(self._enums)

    def contains_value(self, name: str, value: Any) -> bool:
        """Whether *name* is a registered enum with a member equal to *value*."""
        enum = self._enums.get(name)
        if enum is None:
            return False
        return enum.has_value(value)

    def __contains__(self, name: object) -> bool:
        return name in self._enums

    def __len__(self) -> int:
        return len(self._enums)
