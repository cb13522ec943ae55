"""Command: list the offspring classes and enums a module exposes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from offspring.commands._context import AppContext


@click.command("inspect")
@click.argument("module")
@click.pass_obj
def inspect_cmd(app: AppContext, module: str) -> None:
    """Import MODULE and list its classes (membership, fields) and enums."""
    from offspring.services.introspect import IntrospectService

    app.emit(IntrospectService(app.system).inspect_module(module))
