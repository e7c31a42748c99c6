"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Builds the manager lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from valuetypes.config.settings import ValueTypesSettings
    from valuetypes.domain.manager import ValueTypeManager


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The manager (and with it plugin discovery) is built on first use so
    ``--help`` and ``--version`` stay cheap.
    """

    def __init__(self, settings: ValueTypesSettings) -> None:
        self.settings = settings
        self._manager: ValueTypeManager | None = None

        from valuetypes.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def manager(self) -> ValueTypeManager:
        """The configured manager (created lazily on first access)."""
        if self._manager is None:
            from valuetypes.loader import build_manager

            self._manager = build_manager(self.settings)
        return self._manager

    def emit(self, output: str, *, ok: bool = True) -> None:
        """Write *output* with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        if ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        raise SystemExit(1)
