"""Class descriptors, the class builder, and the base Object type.

Classes are real Python classes whose metaclass is :class:`ClassDescriptor`.
Inheritance is a one-time static copy rather than MRO delegation: building
a class copies the namespace of every parent, in argument order, into the
new class and unions the parents' type membership sets. Later parents
overwrite earlier ones on key collisions.

INVARIANT: A class's type membership is fixed at creation. Changing a
parent afterwards never reaches classes already built from it.

Known limitations:

* Members added to :class:`Object` after other classes exist are not seen
  by those classes. Patch the base before defining anything else.
* Copied functions keep the ``__class__`` cell of the class that defined
  them. A method using zero-argument ``super()`` works on its defining
  class but raises ``TypeError`` when called on a class it was copied into.
  Inheritable methods should not use zero-argument ``super()``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableSet
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from offspring.domain.assertions import assert_argument, caller_location
from offspring.domain.errors import ArgumentError

if TYPE_CHECKING:
    from offspring.domain.predicates import TypeChecker
    from offspring.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

BASE_TYPE_NAME = "offspring.Object"

TYPENAME_KEY = "__typename__"
TYPEMAP_KEY = "__typemap__"

DEFAULT_EXCLUDED_FIELDS: frozenset[str] = frozenset({TYPENAME_KEY, TYPEMAP_KEY, "__init__", "new"})

# Python bookkeeping tied to the defining class; never copied or reported.
CLASS_MACHINERY: frozenset[str] = frozenset(
    {
        "__dict__",
        "__weakref__",
        "__module__",
        "__qualname__",
        "__doc__",
        "__firstlineno__",
        "__static_attributes__",
    }
)


class ClassDescriptor(type):
    """Metaclass of every offspring class.

    Supports two spellings that build through the same static-copy path::

        Circle = define_class("Circle", Shape, Named)

        class Circle(Shape, Named):
            def area(self) -> float: ...

    The class-statement form accepts a ``system=`` keyword selecting the
    :class:`~offspring.system.TypeSystem`; the process-wide system is used
    otherwise.
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        system: Any = None,
        _root: bool = False,
    ) -> ClassDescriptor:
        if _root:
            namespace = dict(namespace)
            namespace[TYPEMAP_KEY] = frozenset({namespace[TYPENAME_KEY]})
            return super().__new__(mcls, name, (), namespace)

        if system is None:
            from offspring.system import get_default_system

            system = get_default_system()
        # Metaclass calls add no Python frames, so depth 2 is the class statement.
        return system.classes.build(name, bases, namespace, metaclass=mcls, depth=2)

    def __init__(
        cls, name: str, bases: tuple[type, ...], namespace: dict[str, Any], **_: Any
    ) -> None:
        super().__init__(name, (), {})

    @property
    def type_name(cls) -> str:
        """The unique type name of this class."""
        return cls.__dict__[TYPENAME_KEY]

    @property
    def type_membership(cls) -> frozenset[str]:
        """Every type name this class satisfies, its own included."""
        return cls.__dict__[TYPEMAP_KEY]

    @property
    def fields(cls) -> Mapping[str, Any]:
        """Read-only snapshot of the members that inheritance copies."""
        return MappingProxyType(
            {
                key: value
                for key, value in cls.__dict__.items()
                if key not in CLASS_MACHINERY and key not in (TYPENAME_KEY, TYPEMAP_KEY)
            }
        )

    def __setattr__(cls, key: str, value: Any) -> None:
        if key in (TYPENAME_KEY, TYPEMAP_KEY):
            msg = f"{key} of {cls.type_name} is fixed at class creation"
            raise AttributeError(msg)
        super().__setattr__(key, value)

    def __delattr__(cls, key: str) -> None:
        if key in (TYPENAME_KEY, TYPEMAP_KEY):
            msg = f"{key} of {cls.type_name} is fixed at class creation"
            raise AttributeError(msg)
        super().__delattr__(key)

    def __repr__(cls) -> str:
        return f"<offspring class {cls.type_name}>"


class Object(metaclass=ClassDescriptor, _root=True):
    """Default ancestor of every class built without explicit parents."""

    __typename__ = BASE_TYPE_NAME

    def class_(self) -> ClassDescriptor:
        """Return the class this instance was built from."""
        return type(self)

    def type(self) -> str:
        """Return the type name of this instance's class."""
        return type(self).type_name

    def type_of(self, name: str) -> bool:
        """Whether *name* is in this instance's type membership."""
        return name in type(self).type_membership

    def to_debug_string(self) -> str:
        """Type name plus the raw ``object.__repr__`` of this instance.

        Never calls a ``__repr__`` defined by a subclass.
        """
        return f"{type(self).type_name} instance ({object.__repr__(self)})"

    def __repr__(self) -> str:
        return self.to_debug_string()


class ClassBuilder:
    """Builds class descriptors by statically copying parent namespaces.

    Parameters:
        checker: Type checker used for argument validation.
        plugins: Plugin manager whose ``class_created`` hook runs after
            every build.
        excluded_fields: Live set of namespace keys never copied from a
            parent. Mutations affect subsequent builds only.
    """

    def __init__(
        self,
        checker: TypeChecker,
        plugins: PluginManager,
        excluded_fields: MutableSet[str] | None = None,
    ) -> None:
        self._checker = checker
        self._plugins = plugins
        self.excluded_fields: MutableSet[str] = (
            set(DEFAULT_EXCLUDED_FIELDS) if excluded_fields is None else excluded_fields
        )

    def build(
        self,
        name: str,
        parents: Iterable[Any] = (),
        namespace: Mapping[str, Any] | None = None,
        *,
        metaclass: type[ClassDescriptor] = ClassDescriptor,
        depth: int = 1,
    ) -> ClassDescriptor:
        """Create a new class named *name* from *parents*.

        *namespace* holds the class's own members (a class-statement body);
        they are applied after the parents' fields have been copied.

        Raises:
            ArgumentError: *name* is not a non-empty string, a parent is not
                an offspring class, or *namespace* redefines the reserved
                type keys.
        """
        assert_argument(self._checker, 1, name, "string", depth=depth + 1)
        if not name:
            raise ArgumentError(
                "Class name must not be empty",
                index=1,
                expected="string",
                location=caller_location(depth),
            )

        chain = list(parents)
        for index, parent in enumerate(chain, start=2):
            if not isinstance(parent, ClassDescriptor):
                actual = self._checker.type_name(parent)
                msg = (
                    f"The type of argument #{index} was expected to be "
                    f"an offspring class but was '{actual}'"
                )
                raise ArgumentError(
                    msg,
                    index=index,
                    expected="class",
                    actual=actual,
                    location=caller_location(depth),
                )
        if not chain:
            chain.append(Object)

        own = dict(namespace or {})
        for reserved in (TYPENAME_KEY, TYPEMAP_KEY):
            if reserved in own:
                msg = f"Class {name} must not define {reserved}"
                raise ArgumentError(msg, location=caller_location(depth))
        own.setdefault("__qualname__", name)

        fields: dict[str, Any] = {}
        membership = {name}
        for parent in chain:
            for key, value in parent.__dict__.items():
                if key in CLASS_MACHINERY or key in self.excluded_fields:
                    continue
                fields[key] = value
            membership |= parent.type_membership

        fields.update(own)
        fields[TYPENAME_KEY] = name
        fields[TYPEMAP_KEY] = frozenset(membership)

        new_class = type.__new__(metaclass, name, (), fields)
        logger.debug(
            "Built class %s from %s",
            name,
            ", ".join(parent.type_name for parent in chain),
        )

        self._plugins.hook.class_created(descriptor=new_class, parents=tuple(chain))
        return new_class
