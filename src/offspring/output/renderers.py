"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from offspring.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from offspring.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def _render_type(result: ServiceResult, console: Console) -> None:
    data = result.data
    line = Text()
    line.append(data["value"])
    line.append(" : ", style="os.key")
    line.append(data["type"], style="os.type")
    if data["native"] != data["type"]:
        line.append(f" ({data['native']})", style="os.native")
    console.print(line)


def _render_check(result: ServiceResult, console: Console) -> None:
    data = result.data
    line = Text()
    line.append("OK ", style="os.ok")
    line.append(data["value"])
    line.append(" is ", style="os.key")
    line.append(data["matched"] or data["expression"], style="os.type")
    console.print(line)


def _render_inspect(result: ServiceResult, console: Console) -> None:
    data = result.data
    console.print(Text(data["module"], style="os.op"))

    if data["classes"]:
        table = Table(title="Classes", show_lines=False)
        table.add_column("Attribute")
        table.add_column("Type", style="os.type")
        table.add_column("Membership")
        table.add_column("Fields", style="os.key")
        for item in data["classes"]:
            table.add_row(
                item["attr"],
                item["type_name"],
                ", ".join(item["membership"]),
                ", ".join(item["fields"]),
            )
        console.print(table)

    if data["enums"]:
        table = Table(title="Enums")
        table.add_column("Attribute")
        table.add_column("Name", style="os.enum")
        table.add_column("Members")
        for item in data["enums"]:
            members = ", ".join(f"{k}={v}" for k, v in item["members"].items())
            table.add_row(item["attr"], item["name"], members)
        console.print(table)


def _render_generic(result: ServiceResult, console: Console) -> None:
    console.print(Text(f"OK: {result.op}", style="os.ok"))
    for key, value in result.data.items():
        line = Text(f"  {key}: ", style="os.key")
        line.append(str(value))
        console.print(line)


def _render_error(result: ServiceResult, console: Console) -> None:
    line = Text("ERROR", style="os.error")
    line.append(f": {result.op}: ")
    line.append(result.error.message if result.error else "Unknown error")
    console.print(line)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Any], None]] = {
    "type": _render_type,
    "check": _render_check,
    "inspect": _render_inspect,
}
