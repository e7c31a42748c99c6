"""ValueTypeItem — the parse -> check -> format pipeline for one type.

Each stage failure is isolated and tagged with its own :class:`ErrorCode`
so callers can tell malformed input (``PARSE_FAILURE``/``CHECK_FAILURE``)
apart from a broken formatter (``FORMAT_FAILURE``) without matching on
message text.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sized
from typing import Any

from valuetypes.domain.options import ValueTypeOptions
from valuetypes.domain.results import (
    FAILURE_MESSAGE,
    SUCCESS_MESSAGE,
    CheckResult,
    ErrorCode,
    ValueResult,
)
from valuetypes.domain.validators import as_text

logger = logging.getLogger(__name__)


def _params_absent(params: Any) -> bool:
    if params is None:
        return True
    return isinstance(params, (Mapping, Sized)) and len(params) == 0


class ValueTypeItem:
    """Realized behavior of one registered value type.

    Built once from a :class:`ValueTypeOptions` and never mutated.
    """

    __slots__ = ("_options",)

    def __init__(self, options: ValueTypeOptions) -> None:
        self._options = options

    def __repr__(self) -> str:
        return f"ValueTypeItem(description={self._options.description!r}, nullable={self._options.nullable})"

    @property
    def info(self) -> ValueTypeOptions:
        """The options this item was built from."""
        return self._options

    @property
    def nullable(self) -> bool:
        return self._options.nullable

    def _skips(self, value: Any) -> bool:
        return self._options.nullable and value is None

    def check(self, value: Any, params: Any = None) -> CheckResult:
        """Test *value* against the checker.

        An exception raised by the checker becomes a failed result whose
        message is the exception text and whose ``code`` is left unset.
        """
        checker = self._options.checker
        if checker is None:
            return CheckResult(ok=True, message=SUCCESS_MESSAGE)
        if params is None:
            params = {}
        try:
            if self._skips(value):
                ok = True
            elif checker.kind == "pattern":
                ok = checker.pattern.search(as_text(value)) is not None
            else:
                ok = bool(checker.func(value, params))
        except Exception as exc:
            return CheckResult(ok=False, message=str(exc))
        if ok:
            return CheckResult(ok=True, message=SUCCESS_MESSAGE)
        return CheckResult(ok=False, message=FAILURE_MESSAGE, code=ErrorCode.CHECK_FAILURE)

    def parse(self, value: Any) -> Any:
        """Apply the parser. Exceptions propagate."""
        if self._options.parser is None or self._skips(value):
            return value
        return self._options.parser(value)

    def format(self, value: Any) -> Any:
        """Apply the formatter. Exceptions propagate."""
        if self._options.formatter is None or self._skips(value):
            return value
        return self._options.formatter(value)

    def check_params(self, params: Any) -> CheckResult:
        """Validate caller params against ``params_checker``.

        Absent params pass unless the type declares them required.
        """
        params_checker = self._options.params_checker
        if params_checker is None:
            return CheckResult(ok=True, message=SUCCESS_MESSAGE)
        if _params_absent(params) and not self._options.is_params_required:
            return CheckResult(ok=True, message=SUCCESS_MESSAGE)
        try:
            ok = bool(params_checker(params))
        except Exception as exc:
            return CheckResult(ok=False, message=str(exc), code=ErrorCode.PARAMS_FAILURE)
        if ok:
            return CheckResult(ok=True, message=SUCCESS_MESSAGE)
        return CheckResult(ok=False, message=FAILURE_MESSAGE, code=ErrorCode.PARAMS_FAILURE)

    def value(self, value: Any, params: Any = None, format: bool | None = None) -> ValueResult:  # noqa: A002
        """Run parse -> check -> format on *value*.

        Args:
            value: Raw input.
            params: Per-call type params, ``{}`` when omitted.
            format: Force formatting on or off; ``None`` uses
                ``is_default_format``.
        """
        try:
            try:
                value = self.parse(value)
            except Exception as exc:
                logger.debug("Parse failed: %s", exc)
                return ValueResult(
                    ok=False, message=str(exc), code=ErrorCode.PARSE_FAILURE, value=value
                )

            checked = self.check(value, params)
            if not checked.ok:
                logger.debug("Check failed: %s", checked.message)
                return ValueResult(
                    ok=False, message=checked.message, code=ErrorCode.CHECK_FAILURE, value=value
                )

            if format is None:
                format = self._options.is_default_format  # noqa: A001
            if format:
                try:
                    formatted = self.format(value)
                except Exception as exc:
                    logger.debug("Format failed: %s", exc)
                    return ValueResult(
                        ok=False, message=str(exc), code=ErrorCode.FORMAT_FAILURE, value=value
                    )
                return ValueResult(ok=True, message=SUCCESS_MESSAGE, value=formatted)
            return ValueResult(ok=True, message=SUCCESS_MESSAGE, value=value)
        except Exception as exc:
            logger.debug("Pipeline failed: %s", exc, exc_info=True)
            return ValueResult(
                ok=False, message=str(exc), code=ErrorCode.UNKNOWN_FAILURE, value=value
            )
