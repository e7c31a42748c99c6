"""Built-in plugin registering the ``[types.<Name>]`` entries of valuetypes.toml.

Each entry becomes a type whose checker is the declared regular expression.
An entry whose pattern does not compile is skipped with a warning so the
rest of the file still loads.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING

from valuetypes.domain.options import ValueTypeOptions
from valuetypes.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from valuetypes.config.models import PatternTypeConfig
    from valuetypes.domain.manager import ValueTypeManager

logger = logging.getLogger(__name__)


def _strip(value: object) -> object:
    return value.strip() if isinstance(value, str) else value


class PatternTypesPlugin:
    """Registers regex-declared types from configuration."""

    def __init__(self, types: Mapping[str, PatternTypeConfig] | None = None) -> None:
        self._types = dict(types or {})

    @hookimpl
    def register_value_types(self, manager: ValueTypeManager) -> None:
        for name, declared in self._types.items():
            try:
                pattern = re.compile(declared.pattern)
            except re.error as exc:
                logger.warning("Skipping type %s: invalid pattern %r (%s)", name, declared.pattern, exc)
                continue
            manager.register(
                name,
                ValueTypeOptions(
                    checker=pattern,
                    formatter=_strip if declared.trim else None,
                    is_default_format=declared.is_default_format,
                    description=declared.description,
                    ts_type=declared.ts_type,
                    swagger_type=declared.swagger_type,
                ),
            )
