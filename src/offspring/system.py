"""TypeSystem: the explicit registry object threaded through the API.

A :class:`TypeSystem` owns every piece of process-scoped state the
library needs: the enum registry, the excluded-fields set, and the
plugin manager carrying the ``class_created`` hook. Applications that
want isolation create their own instance; the package-level functions
(``offspring.define_class`` and friends) use the process-wide instance
returned by :func:`get_default_system`.

Concurrency: single-threaded. If the host is multi-threaded, callers must
serialize ``define_class``/``define_enum`` and mutations of
``excluded_fields``. Reads after definition are safe to share.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import Any, TypeVar

from offspring.config.settings import OffspringSettings
from offspring.domain import assertions
from offspring.domain.classes import ClassBuilder, ClassDescriptor
from offspring.domain.enums import EnumRegistry, FrozenEnum
from offspring.domain.predicates import TypeChecker
from offspring.plugins.manager import PluginManager

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TypeSystem:
    """Class builder, enum registry, and type checker sharing one state.

    Parameters:
        settings: Delimiter, default excluded fields, and plugin autoload.
            Defaults to ``OffspringSettings()`` (env vars and code defaults).
        plugins: Plugin manager to use; a fresh one is created otherwise.
    """

    def __init__(
        self,
        settings: OffspringSettings | None = None,
        plugins: PluginManager | None = None,
    ) -> None:
        self.settings = settings or OffspringSettings()
        self.plugins = plugins or PluginManager()
        if self.settings.plugins.autoload and not self.plugins.is_loaded:
            self.plugins.discover_and_load()

        self.enums = EnumRegistry(self.plugins)
        self.checker = TypeChecker(self.enums, delimiter=self.settings.types.union_delimiter)
        self.classes = ClassBuilder(
            self.checker,
            self.plugins,
            excluded_fields=set(self.settings.types.excluded_fields),
        )

    @property
    def excluded_fields(self) -> set[str]:
        """Namespace keys never copied from a parent. Mutable at any time."""
        return self.classes.excluded_fields  # type: ignore[return-value]

    def define_class(
        self,
        name: str,
        *parents: ClassDescriptor,
        module: str | None = None,
        depth: int = 1,
    ) -> ClassDescriptor:
        """Create a class named *name* by statically copying *parents*.

        With no parents the class derives from :class:`~offspring.Object`.
        *module* sets ``__module__``; it defaults to the module of the frame
        *depth* levels up, which is also the frame argument errors name.
        """
        if module is None:
            module = sys._getframe(depth).f_globals.get("__name__")
        namespace = {"__module__": module} if module else None
        return self.classes.build(name, parents, namespace, depth=depth + 1)

    def define_enum(self, name: str, members: Mapping[str, Any]) -> FrozenEnum:
        """Register a closed enum and return its frozen view."""
        return self.enums.define(name, members)

    def type_name(self, value: Any) -> str:
        """Return the type name of *value*."""
        return self.checker.type_name(value)

    def type_of(self, value: Any, expression: str) -> bool:
        """Whether *value* satisfies the union type *expression*."""
        return self.checker.type_of(value, expression)

    def assert_type(
        self,
        value: T,
        expected: str,
        label: str | None = None,
        depth: int = 1,
    ) -> T:
        """Return *value* if it satisfies *expected*, else raise TypeMismatchError."""
        return assertions.assert_type(self.checker, value, expected, label, depth + 1)

    def assert_argument(self, index: int, value: T, expected: str) -> T:
        """Return argument *value* if it satisfies *expected*, else raise ArgumentError."""
        return assertions.assert_argument(self.checker, index, value, expected, depth=3)


_default_system: TypeSystem | None = None


def get_default_system() -> TypeSystem:
    """Return the process-wide :class:`TypeSystem`, creating it on first use."""
    global _default_system
    if _default_system is None:
        _default_system = TypeSystem()
        logger.debug("Created default type system")
    return _default_system
