"""Command: check a literal value against a union type expression."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from offspring.commands._context import AppContext


@click.command()
@click.argument("value")
@click.argument("expression")
@click.option(
    "--enum",
    "enums",
    multiple=True,
    metavar="NAME=KEY:VALUE,...",
    help="Define an enum usable in EXPRESSION. Repeatable.",
)
@click.pass_obj
def check(app: AppContext, value: str, expression: str, enums: tuple[str, ...]) -> None:
    """Check VALUE against EXPRESSION, e.g. 'string|number'. Exits 1 on mismatch."""
    from offspring.services.introspect import IntrospectService

    app.emit(IntrospectService(app.system).check(value, expression, enums=list(enums)))
