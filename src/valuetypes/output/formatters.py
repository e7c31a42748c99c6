"""Rich/JSON output helpers.

The CLI renders ValueResult records and type catalogs for humans (Rich
tables and colored status lines) or machines (--json).
"""

from __future__ import annotations

import json as _json
import math
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from valuetypes.domain.catalog import swagger_schema
from valuetypes.output.console import create_console, get_output, style_for_origin

if TYPE_CHECKING:
    from collections.abc import Sequence

    from valuetypes.domain.catalog import TypeDescriptor
    from valuetypes.domain.results import CheckResult


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None so the output stays valid JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value


def _dumps(value: Any, *, indent: int | None = None) -> str:
    return _json.dumps(
        _finite(value), default=str, ensure_ascii=False, indent=indent, allow_nan=False
    )


def format_value_result(
    result: CheckResult,
    *,
    type_name: str,
    json_output: bool = False,
) -> str:
    """Format a CheckResult/ValueResult for display.

    Values are shown JSON-encoded so ``"true"`` and ``true`` stay distinct.
    """
    payload = {"type": type_name, **result.model_dump()}
    if json_output:
        return _dumps(payload, indent=2)

    console = create_console()
    if result.ok:
        console.print(Text.assemble(("OK", "vt.ok"), (f"  {type_name}", "vt.name")))
    else:
        console.print(Text.assemble(("ERROR", "vt.error"), (f"  {type_name}", "vt.name")))
        console.print(Text.assemble(("  code: ", "vt.key"), (str(result.code or "-"), "vt.code")))
        console.print(Text.assemble(("  message: ", "vt.key"), result.message))
    if "value" in payload:
        console.print(Text.assemble(("  value: ", "vt.key"), (_dumps(payload["value"]), "vt.value")))
    return get_output(console).rstrip("\n")


def format_types(
    descriptors: Sequence[TypeDescriptor],
    *,
    json_output: bool = False,
    schema: bool = False,
) -> str:
    """Format a type catalog as a Rich table, a JSON list, or OpenAPI schemas."""
    if schema:
        return _dumps({d.name: swagger_schema(d) for d in descriptors}, indent=2)
    if json_output:
        return _dumps([d.model_dump() for d in descriptors], indent=2)

    table = Table(title=f"{len(descriptors)} value types", title_justify="left")
    table.add_column("Name", no_wrap=True)
    table.add_column("Swagger")
    table.add_column("TS type")
    table.add_column("Format", justify="center")
    table.add_column("Params", justify="center")
    table.add_column("Description")
    for d in descriptors:
        if d.is_params_required:
            params = "required"
        elif d.has_params_checker:
            params = "optional"
        else:
            params = ""
        table.add_row(
            Text(d.name, style=style_for_origin(is_builtin=d.is_builtin, nullable=d.nullable)),
            d.swagger_type or "",
            d.ts_type or "",
            "yes" if d.is_default_format else "",
            params,
            d.description,
        )

    console = create_console()
    console.print(table)
    return get_output(console).rstrip("\n")
