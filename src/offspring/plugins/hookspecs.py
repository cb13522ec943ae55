"""Pluggy hook specifications for offspring definition events.

Both hooks run synchronously inside the defining call, so an exception
raised by an implementation propagates to the code that defined the
class or enum.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from offspring.domain.classes import ClassDescriptor
    from offspring.domain.enums import FrozenEnum

hookspec = pluggy.HookspecMarker("offspring")
hookimpl = pluggy.HookimplMarker("offspring")


class OffspringHookSpec:
    """Hook specifications for the offspring plugin system."""

    @hookspec
    def class_created(
        self,
        descriptor: ClassDescriptor,
        parents: tuple[ClassDescriptor, ...],
    ) -> None:
        """Called after a class has been composed from its parents.

        *parents* is the effective parent list, so it holds ``Object``
        when the class was defined without explicit parents. Implementations
        may add members to *descriptor*, e.g. a generated constructor.
        """

    @hookspec
    def enum_defined(self, name: str, members: FrozenEnum) -> None:
        """Called after an enum has been registered."""
