"""Command: report the type name of a literal value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from offspring.commands._context import AppContext


@click.command("type")
@click.argument("value")
@click.pass_obj
def type_cmd(app: AppContext, value: str) -> None:
    """Print the type name of VALUE (a Python literal, else a string)."""
    from offspring.services.introspect import IntrospectService

    app.emit(IntrospectService(app.system).describe(value))
