"""Command: list registered value types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuetypes.commands._base import VtCommand

if TYPE_CHECKING:
    from valuetypes.commands._context import AppContext


@click.command(
    "types",
    cls=VtCommand,
    examples="""\
  valuetypes types
  valuetypes types --builtin-only --no-nullable
  valuetypes --json types
  valuetypes types --schema > value-types.schema.json""",
)
@click.option("--builtin-only", is_flag=True, help="Only show built-in types.")
@click.option("--no-nullable", is_flag=True, help="Hide derived Nullable* variants.")
@click.option("--schema", is_flag=True, help="Emit OpenAPI property schemas as JSON.")
@click.pass_obj
def types_cmd(app: AppContext, builtin_only: bool, no_nullable: bool, schema: bool) -> None:
    """List registered value types."""
    from valuetypes.domain.catalog import describe_types
    from valuetypes.output.formatters import format_types

    descriptors = describe_types(
        app.manager,
        include_nullable=not no_nullable,
        builtin_only=builtin_only,
    )
    app.emit(format_types(descriptors, json_output=app.settings.json_output, schema=schema))
