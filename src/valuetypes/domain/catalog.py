"""Type catalog export for documentation and code generation consumers.

Walks a manager's registrations and turns each item's descriptive metadata
into a :class:`TypeDescriptor`. Nothing here evaluates checkers or parsers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from valuetypes.domain.manager import ValueTypeManager

_DATE_TS_TYPES = frozenset({"Date", "Date | null"})


class TypeDescriptor(BaseModel):
    """Documentation record for one registered type."""

    model_config = {"frozen": True}

    name: str
    description: str = ""
    ts_type: str | None = None
    swagger_type: str | None = None
    nullable: bool = False
    is_builtin: bool = False
    is_default_format: bool = False
    is_params_required: bool = False
    has_params_checker: bool = False


def describe_types(
    manager: ValueTypeManager,
    *,
    include_nullable: bool = True,
    builtin_only: bool = False,
) -> list[TypeDescriptor]:
    """Describe every registered type, in registration order."""
    descriptors: list[TypeDescriptor] = []
    for name, item in manager.items():
        info = item.info
        if info.nullable and not include_nullable:
            continue
        if builtin_only and not info.is_builtin:
            continue
        descriptors.append(
            TypeDescriptor(
                name=name,
                description=info.description,
                ts_type=info.ts_type,
                swagger_type=info.swagger_type,
                nullable=info.nullable,
                is_builtin=info.is_builtin,
                is_default_format=info.is_default_format,
                is_params_required=info.is_params_required,
                has_params_checker=info.params_checker is not None,
            )
        )
    return descriptors


def swagger_schema(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Render an OpenAPI property schema for *descriptor*."""
    schema: dict[str, Any] = {"type": descriptor.swagger_type or "string"}
    if descriptor.ts_type in _DATE_TS_TYPES:
        schema["format"] = "date"
    if descriptor.description:
        schema["description"] = descriptor.description
    if descriptor.nullable:
        schema["nullable"] = True
    return schema
