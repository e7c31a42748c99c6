"""Value type options — the definition a type is registered with.

Options are frozen once built. Each field documents its effect on the
parse -> check -> format pipeline; descriptive fields (``description``,
``ts_type``, ``swagger_type``, ``is_builtin``) are carried for documentation
and code generation but never evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator

SwaggerType = Literal["string", "number", "integer", "boolean", "array", "object"]


class PredicateChecker(BaseModel):
    """Checker that calls ``func(value, params)`` and tests the result for truth."""

    model_config = {"frozen": True}

    kind: Literal["predicate"] = "predicate"
    func: Callable[..., Any]


class PatternChecker(BaseModel):
    """Checker that searches ``pattern`` in the text form of the value."""

    model_config = {"frozen": True}

    kind: Literal["pattern"] = "pattern"
    pattern: re.Pattern


Checker = Annotated[PredicateChecker | PatternChecker, Field(discriminator="kind")]


class ValueTypeOptions(BaseModel):
    """Definition of one value type.

    Attributes:
        checker: Validity rule. ``None`` means always valid. Plain callables,
            compiled patterns and pattern strings are accepted and wrapped in
            the matching checker variant.
        params_checker: Validates the shape of caller params. May return
            False or raise to reject them.
        is_params_required: Run ``params_checker`` even when params are
            absent or empty.
        parser: Applied to the raw input before checking.
        formatter: Applied to the checked value when formatting is requested.
        is_default_format: Whether formatting runs when the caller does not
            ask either way.
        nullable: ``None`` input skips parsing, checking and formatting.
            Set on the derived ``Nullable<Name>`` variants.
    """

    model_config = {"frozen": True}

    checker: Checker | None = None
    params_checker: Callable[[Any], Any] | None = None
    is_params_required: bool = False
    parser: Callable[[Any], Any] | None = None
    formatter: Callable[[Any], Any] | None = None
    is_default_format: bool = False
    nullable: bool = False

    description: str = ""
    ts_type: str | None = None
    swagger_type: SwaggerType | None = None
    is_builtin: bool = False

    @field_validator("checker", mode="before")
    @classmethod
    def _wrap_checker(cls, value: Any) -> Any:
        if value is None or isinstance(value, (PredicateChecker, PatternChecker, dict)):
            return value
        if isinstance(value, (str, re.Pattern)):
            return PatternChecker(pattern=value)
        if callable(value):
            return PredicateChecker(func=value)
        return value

    def as_nullable(self) -> ValueTypeOptions:
        """Return a copy that also accepts ``None``."""
        update: dict[str, Any] = {"nullable": True}
        if self.ts_type:
            update["ts_type"] = f"{self.ts_type} | null"
        return self.model_copy(update=update)
