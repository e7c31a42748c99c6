"""CheckResult and ValueResult — the uniform return records of the pipeline.

INVARIANT: ``ValueTypeItem.value()`` never raises for malformed input.
Every stage failure is reported through one of these records with a
stable :class:`ErrorCode`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel

SUCCESS_MESSAGE = "success"
FAILURE_MESSAGE = "failure"


class ErrorCode(StrEnum):
    """Stable failure codes, one per pipeline stage."""

    PARSE_FAILURE = "PARSE_FAILURE"
    CHECK_FAILURE = "CHECK_FAILURE"
    FORMAT_FAILURE = "FORMAT_FAILURE"
    UNKNOWN_FAILURE = "UNKNOWN_FAILURE"
    # Only produced by check_params(), never by value().
    PARAMS_FAILURE = "PARAMS_FAILURE"


class CheckResult(BaseModel):
    """Outcome of a check.

    Attributes:
        ok: Whether the value (or params) passed.
        message: ``"success"``, ``"failure"``, or the text of the exception
            raised while checking.
        code: Failure code; left unset on success and when ``check()`` itself
            caught an exception.
    """

    model_config = {"frozen": True}

    ok: bool
    message: str
    code: ErrorCode | None = None


class ValueResult(CheckResult):
    """Outcome of the full parse -> check -> format pipeline.

    ``value`` holds the final value on success, or the best-known value at
    the point of failure.
    """

    value: Any = None
