"""Root CLI group for offspring with global flags and command registration."""

from __future__ import annotations

import click

from offspring import __version__
from offspring.commands import register_commands
from offspring.commands._context import AppContext
from offspring.config.settings import OffspringSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="offspring")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """offspring: class and type checking utilities."""
    # Unset flags are omitted so env vars and offspring.toml can still turn them on.
    flags = {
        name: True
        for name, value in (
            ("json_output", json_output),
            ("verbose", verbose),
            ("log_json", log_json),
        )
        if value
    }
    settings = OffspringSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
