"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy TypeSystem initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from offspring.output.formatters import format_result

if TYPE_CHECKING:
    from offspring.config.settings import OffspringSettings
    from offspring.services.result import ServiceResult
    from offspring.system import TypeSystem


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The type system is created lazily so ``--help`` and ``--version``
    never load plugins.
    """

    def __init__(self, settings: OffspringSettings) -> None:
        self.settings = settings
        self._system: TypeSystem | None = None

        from offspring.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def system(self) -> TypeSystem:
        """A private type system built from the CLI settings."""
        if self._system is None:
            from offspring.system import TypeSystem

            self._system = TypeSystem(self.settings)
        return self._system

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, json_output=self.settings.json_output)
        if result.ok:
            click.echo(output)
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
