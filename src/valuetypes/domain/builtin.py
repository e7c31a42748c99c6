"""Built-in value type catalog.

Every entry is plain data handed to :meth:`ValueTypeManager.register`; the
manager treats built-ins exactly like caller registrations. String-format
rules come from the injected :class:`StringValidators`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from valuetypes.domain.options import ValueTypeOptions
from valuetypes.domain.validators import StringValidators, as_text, is_nan, to_number

if TYPE_CHECKING:
    from valuetypes.domain.manager import ValueTypeManager

_SEQUENCE_TYPES = (list, tuple)
_CHOICE_TYPES = (list, tuple, set, frozenset)


# ---------------------------------------------------------------------------
# Shared coercions
# ---------------------------------------------------------------------------


def parse_query_boolean(value: Any, fallback: bool) -> bool:
    """Read ``"1"``/``"true"``/``"0"``/``"false"``; anything else yields *fallback*."""
    text = as_text(value)
    if text in ("1", "true"):
        return True
    if text in ("0", "false"):
        return False
    return fallback


def parse_date(text: str) -> date:
    """Parse ``YYYY-MM-DD`` text, or an ISO timestamp, into a date or datetime."""
    text = text.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    year, month, day = (int(part) for part in text.split("-"))
    return date(year, month, day)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Parameterized types
# ---------------------------------------------------------------------------


def _check_number(value: Any, params: Any) -> bool:
    if is_nan(value):
        return False
    if isinstance(params, Mapping):
        if "min" in params and not value >= params["min"]:
            return False
        if "max" in params and not value <= params["max"]:
            return False
    return True


def _check_number_params(params: Any) -> bool:
    if not isinstance(params, Mapping):
        msg = f"params must be a mapping with optional min/max, got {type(params).__name__}"
        raise ValueError(msg)
    for bound in ("max", "min"):
        if bound in params and not _is_number(params[bound]):
            value = params[bound]
            msg = f"params.{bound} must be a number, got {value!r} ({type(value).__name__})"
            raise ValueError(msg)
    if "max" in params and "min" in params and not params["min"] < params["max"]:
        msg = "params.min must be less than params.max"
        raise ValueError(msg)
    return True


def _check_array_params(params: Any) -> bool:
    if isinstance(params, str):
        return True
    return isinstance(params, Mapping) and isinstance(params.get("type"), str)


def _check_enum(value: Any, params: Any) -> bool:
    return isinstance(params, _CHOICE_TYPES) and len(params) > 0 and value in params


def _check_enum_params(params: Any) -> bool:
    if not isinstance(params, _CHOICE_TYPES) or len(params) == 0:
        msg = "params must be a non-empty list of choices"
        raise ValueError(msg)
    return True


# ---------------------------------------------------------------------------
# Array types
# ---------------------------------------------------------------------------


def _parse_int_array(value: Any) -> Any:
    if isinstance(value, _SEQUENCE_TYPES):
        return value
    return sorted(to_number(part) for part in as_text(value).split(","))


def _parse_string_array(value: Any) -> Any:
    if isinstance(value, _SEQUENCE_TYPES):
        return value
    return as_text(value).split(",")


def _format_string_array(values: Any) -> list[str]:
    return [as_text(v).strip() for v in values]


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def builtin_definitions(v: StringValidators) -> dict[str, ValueTypeOptions]:
    """Return the built-in catalog as ``{name: options}`` in registration order."""

    def text_rule(rule: Any) -> Any:
        return lambda value, _params=None: isinstance(value, str) and rule(value)

    def string_type(description: str, checker: Any, ts_type: str = "string") -> ValueTypeOptions:
        return ValueTypeOptions(
            checker=checker,
            description=description,
            ts_type=ts_type,
            swagger_type="string",
            is_builtin=True,
        )

    return {
        "Boolean": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, bool)
            or (isinstance(value, str) and v.is_boolean(value)),
            formatter=lambda value: value
            if isinstance(value, bool)
            else parse_query_boolean(value, bool(value)),
            description="Boolean",
            ts_type="boolean",
            swagger_type="boolean",
            is_builtin=True,
            is_default_format=True,
        ),
        "Date": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, date)
            or (isinstance(value, str) and len(value.split("-")) == 3),
            formatter=lambda value: value if isinstance(value, date) else parse_date(value),
            description="Date (2017-05-01)",
            ts_type="Date",
            swagger_type="string",
            is_builtin=True,
            is_default_format=True,
        ),
        "String": string_type("String", lambda value, _p=None: isinstance(value, str)),
        "TrimString": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, str),
            formatter=str.strip,
            description="String with surrounding whitespace removed",
            ts_type="string",
            swagger_type="string",
            is_builtin=True,
            is_default_format=True,
        ),
        "NotEmptyString": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, str) and not v.is_empty(value),
            formatter=str.strip,
            description="Non-empty string",
            ts_type="string",
            swagger_type="string",
            is_builtin=True,
            is_default_format=True,
        ),
        "Number": ValueTypeOptions(
            parser=to_number,
            checker=_check_number,
            params_checker=_check_number_params,
            description="Number",
            ts_type="number",
            swagger_type="number",
            is_builtin=True,
        ),
        "Integer": ValueTypeOptions(
            checker=lambda value, _p=None: v.is_int(as_text(value)),
            formatter=to_number,
            description="Integer",
            ts_type="number",
            swagger_type="integer",
            is_builtin=True,
            is_default_format=True,
        ),
        "Float": ValueTypeOptions(
            checker=lambda value, _p=None: v.is_float(as_text(value)),
            formatter=to_number,
            description="Floating point number",
            ts_type="number",
            swagger_type="number",
            is_builtin=True,
            is_default_format=True,
        ),
        "Object": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, (Mapping, *_SEQUENCE_TYPES)),
            description="Object",
            ts_type="Record<string, any>",
            swagger_type="object",
            is_builtin=True,
        ),
        "Array": ValueTypeOptions(
            checker=lambda value, _p=None: isinstance(value, _SEQUENCE_TYPES),
            params_checker=_check_array_params,
            description="Array",
            ts_type="any[]",
            swagger_type="array",
            is_builtin=True,
        ),
        "JSON": ValueTypeOptions(
            checker=text_rule(v.is_json),
            formatter=json.loads,
            description="Object decoded from JSON text",
            ts_type="Record<string, any>",
            swagger_type="object",
            is_builtin=True,
            is_default_format=True,
        ),
        "JSONString": ValueTypeOptions(
            checker=text_rule(v.is_json),
            formatter=str.strip,
            description="JSON text",
            ts_type="string",
            swagger_type="string",
            is_builtin=True,
            is_default_format=True,
        ),
        "Any": ValueTypeOptions(
            checker=lambda _value, _p=None: True,
            description="Any value",
            ts_type="any",
            swagger_type="string",
            is_builtin=True,
        ),
        "MongoIdString": string_type(
            "MongoDB ObjectId string",
            lambda value, _p=None: v.is_mongo_id(as_text(value)),
        ),
        "Email": string_type("E-mail address", text_rule(v.is_email)),
        "Domain": string_type("Domain name (e.g. domain.com)", text_rule(v.is_fqdn)),
        "Alpha": string_type("Letters only (a-zA-Z)", text_rule(v.is_alpha)),
        "AlphaNumeric": string_type(
            "Letters and digits (a-zA-Z0-9)",
            text_rule(v.is_alphanumeric),
            ts_type="string | number",
        ),
        "Ascii": string_type("ASCII string", text_rule(v.is_ascii)),
        "Base64": string_type("Base64 string", text_rule(v.is_base64)),
        "URL": string_type("URL", text_rule(v.is_url)),
        "ENUM": ValueTypeOptions(
            checker=_check_enum,
            params_checker=_check_enum_params,
            is_params_required=True,
            description="One of the choices given as params",
            ts_type="any",
            swagger_type="string",
            is_builtin=True,
        ),
        "IntArray": ValueTypeOptions(
            parser=_parse_int_array,
            checker=lambda values, _p=None: isinstance(values, _SEQUENCE_TYPES)
            and all(v.is_int(as_text(n)) for n in values),
            description="Comma separated integers",
            ts_type="number[]",
            swagger_type="array",
            is_builtin=True,
        ),
        "StringArray": ValueTypeOptions(
            parser=_parse_string_array,
            checker=lambda values, _p=None: isinstance(values, _SEQUENCE_TYPES),
            formatter=_format_string_array,
            description="Comma separated strings",
            ts_type="string[]",
            swagger_type="array",
            is_builtin=True,
            is_default_format=True,
        ),
    }


def register_builtin_types(manager: ValueTypeManager, validators: StringValidators) -> None:
    """Register the built-in catalog on *manager*."""
    for name, options in builtin_definitions(validators).items():
        manager.register(name, options)
