"""Root CLI group for valuetypes with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from valuetypes import __version__
from valuetypes.commands import register_commands
from valuetypes.commands._context import AppContext
from valuetypes.config.models import ManagerConfig
from valuetypes.config.settings import ValueTypesSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="valuetypes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--no-builtins", is_flag=True, help="Start from an empty registry.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_builtins: bool,
) -> None:
    """valuetypes — parse, check and format values by named type."""
    overrides: dict[str, Any] = {}
    if no_builtins:
        overrides["manager"] = ManagerConfig(disable_builtin_types=True)
    settings = ValueTypesSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
