"""Command: run one input through a value type's pipeline."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from valuetypes.commands._base import VtCommand

if TYPE_CHECKING:
    from valuetypes.commands._context import AppContext


def _decode_json(text: str, param_hint: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        msg = f"not valid JSON: {exc}"
        raise click.BadParameter(msg, param_hint=param_hint) from exc


@click.command(
    cls=VtCommand,
    examples="""\
  valuetypes value Integer 42
  valuetypes value Boolean true --no-format
  valuetypes value Number 11 --params '{"min": 0, "max": 10}'
  valuetypes value ENUM red -p '["red", "green"]'
  valuetypes value NullableString null --json-input
  valuetypes --json value IntArray '3, 1, 2'""",
)
@click.argument("type_name")
@click.argument("raw_input", metavar="INPUT")
@click.option("-p", "--params", "params_json", default=None, help="Type params as JSON.")
@click.option(
    "--format/--no-format",
    "format_",
    default=None,
    help="Force formatting on or off (default: the type's own setting).",
)
@click.option("--json-input", is_flag=True, help="Decode INPUT as JSON before checking.")
@click.pass_obj
def value(
    app: AppContext,
    type_name: str,
    raw_input: str,
    params_json: str | None,
    format_: bool | None,
    json_input: bool,
) -> None:
    """Parse, check and format INPUT as TYPE_NAME."""
    from valuetypes.output.formatters import format_value_result

    manager = app.manager
    if not manager.has(type_name):
        msg = f"Unknown value type {type_name!r}. Run 'valuetypes types' to list them."
        raise click.UsageError(msg)

    params = _decode_json(params_json, "'--params'") if params_json is not None else None
    data = _decode_json(raw_input, "'INPUT'") if json_input else raw_input
    json_output = app.settings.json_output

    params_result = manager.check_params(type_name, params)
    if not params_result.ok:
        app.emit(
            format_value_result(params_result, type_name=type_name, json_output=json_output),
            ok=False,
        )

    result = manager.value(type_name, data, params, format_)
    app.emit(
        format_value_result(result, type_name=type_name, json_output=json_output),
        ok=result.ok,
    )
