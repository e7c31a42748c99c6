"""valuetypes — named value types that parse, check and format loose input."""

from __future__ import annotations

from valuetypes.domain.errors import ValueTypeError, ValueTypeNotFoundError
from valuetypes.domain.item import ValueTypeItem
from valuetypes.domain.manager import ValueTypeManager
from valuetypes.domain.options import PatternChecker, PredicateChecker, ValueTypeOptions
from valuetypes.domain.results import CheckResult, ErrorCode, ValueResult

__version__ = "0.3.0"

__all__ = [
    "CheckResult",
    "ErrorCode",
    "PatternChecker",
    "PredicateChecker",
    "ValueResult",
    "ValueTypeError",
    "ValueTypeItem",
    "ValueTypeManager",
    "ValueTypeNotFoundError",
    "ValueTypeOptions",
    "__version__",
]
