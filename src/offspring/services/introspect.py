"""IntrospectService: type queries and module inspection for the CLI.

Values arrive as command-line text. They are parsed as Python literals
with :func:`ast.literal_eval`; anything that is not a literal is taken
as a plain string.
"""

from __future__ import annotations

import ast
import importlib
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from offspring.domain.classes import ClassDescriptor
from offspring.domain.enums import FrozenEnum
from offspring.domain.errors import TypeMismatchError
from offspring.domain.natives import native_type_name
from offspring.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from offspring.system import TypeSystem

logger = logging.getLogger(__name__)


def parse_literal(raw: str) -> Any:
    """Parse *raw* as a Python literal, falling back to the string itself."""
    try:
        return ast.literal_eval(raw)
    except (ValueError, SyntaxError):
        return raw


def parse_enum_spec(spec: str) -> tuple[str, dict[str, Any]]:
    """Parse ``NAME=KEY:VALUE,KEY:VALUE`` into an enum name and members.

    Raises:
        ValueError: The enum definition is malformed.
    """
    name, sep, body = spec.partition("=")
    name = name.strip()
    if not sep or not name:
        msg = f"Invalid enum spec {spec!r}: expected NAME=KEY:VALUE,..."
        raise ValueError(msg)

    members: dict[str, Any] = {}
    for pair in filter(None, (part.strip() for part in body.split(","))):
        key, sep, raw_value = pair.partition(":")
        if not sep or not key.strip():
            msg = f"Invalid enum member {pair!r} in {name}: expected KEY:VALUE"
            raise ValueError(msg)
        members[key.strip()] = parse_literal(raw_value.strip())
    return name, members


class IntrospectService:
    """Type queries against one :class:`~offspring.system.TypeSystem`."""

    def __init__(self, system: TypeSystem) -> None:
        self._system = system

    def describe(self, raw: str) -> ServiceResult:
        """Report the type name and native category of a literal."""
        value = parse_literal(raw)
        return ServiceResult(
            ok=True,
            op="type",
            data={
                "value": repr(value),
                "type": self._system.type_name(value),
                "native": native_type_name(value),
            },
        )

    def check(
        self,
        raw: str,
        expression: str,
        *,
        enums: list[str] | None = None,
    ) -> ServiceResult:
        """Check a literal against a union type expression.

        *enums* are ``NAME=KEY:VALUE,...`` specs registered before the
        check, so enum names can appear in *expression*.
        """
        op = "check"
        try:
            for spec in enums or []:
                name, members = parse_enum_spec(spec)
                self._system.define_enum(name, members)
        except ValueError as exc:
            return _failure(op, "INVALID_ENUM", str(exc))

        value = parse_literal(raw)
        data = {
            "value": repr(value),
            "expression": expression,
            "type": self._system.type_name(value),
        }
        try:
            self._system.assert_type(value, expression)
        except TypeMismatchError as exc:
            return _failure(op, "TYPE_MISMATCH", str(exc), detail=data)

        data["matched"] = self._system.checker.match(value, expression)
        return ServiceResult(ok=True, op=op, data=data)

    def inspect_module(self, module_name: str) -> ServiceResult:
        """List the offspring classes and enums exposed by a module."""
        op = "inspect"
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            return _failure(op, "IMPORT_ERROR", f"Cannot import {module_name}: {exc}")

        classes: list[dict[str, Any]] = []
        enums: list[dict[str, Any]] = []
        for attr, value in sorted(vars(module).items()):
            if attr.startswith("_"):
                continue
            if isinstance(value, ClassDescriptor):
                classes.append(_describe_class(attr, value))
            elif isinstance(value, FrozenEnum):
                enums.append(_describe_enum(attr, value))

        logger.debug(
            "Inspected %s: %d classes, %d enums", module_name, len(classes), len(enums)
        )
        warnings: list[str] = []
        if not classes and not enums:
            warnings.append(f"{module_name} exposes no offspring classes or enums")
        return ServiceResult(
            ok=True,
            op=op,
            data={"module": module_name, "classes": classes, "enums": enums},
            warnings=warnings,
        )


def _describe_class(attr: str, cls: ClassDescriptor) -> dict[str, Any]:
    return {
        "attr": attr,
        "type_name": cls.type_name,
        "membership": sorted(cls.type_membership),
        "fields": sorted(cls.fields),
    }


def _describe_enum(attr: str, enum: FrozenEnum) -> dict[str, Any]:
    return {
        "attr": attr,
        "name": enum.name,
        "members": {key: repr(value) for key, value in enum.items()},
    }


def _failure(
    op: str,
    code: str,
    message: str,
    *,
    detail: Mapping[str, Any] | None = None,
) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail or {})),
    )
