"""ValueTypeManager — the type namespace.

INVARIANT: registering ``T`` always registers ``NullableT`` alongside it,
built from the same options with ``nullable=True``. A later registration of
the same name replaces both entries (last write wins).

Built-in types are seeded through :meth:`ValueTypeManager.register` like any
other type, so there is exactly one registration path.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from typing import Any

from valuetypes.domain.errors import ValueTypeNotFoundError
from valuetypes.domain.item import ValueTypeItem
from valuetypes.domain.options import ValueTypeOptions
from valuetypes.domain.results import CheckResult, ValueResult
from valuetypes.domain.validators import DefaultStringValidators, StringValidators

logger = logging.getLogger(__name__)

NULLABLE_PREFIX = "Nullable"


class ValueTypeManager:
    """Registry of named value types.

    Registration is expected to finish before concurrent reads start.
    ``register`` holds a lock so an item and its nullable sibling are stored
    together; lookups are plain dict reads.
    """

    def __init__(
        self,
        *,
        disable_builtin_types: bool = False,
        validators: StringValidators | None = None,
    ) -> None:
        self._types: dict[str, ValueTypeItem] = {}
        self._lock = threading.Lock()
        self.validators: StringValidators = validators or DefaultStringValidators()
        if not disable_builtin_types:
            from valuetypes.domain.builtin import register_builtin_types

            register_builtin_types(self, self.validators)
            logger.debug("Seeded %d built-in value types", len(self._types))

    def register(
        self,
        name: str,
        options: ValueTypeOptions | Mapping[str, Any],
    ) -> ValueTypeManager:
        """Register *name* and its ``Nullable`` variant. Returns ``self`` for chaining."""
        if not isinstance(options, ValueTypeOptions):
            options = ValueTypeOptions.model_validate(options)
        item = ValueTypeItem(options)
        nullable_item = ValueTypeItem(options.as_nullable())
        with self._lock:
            replaced = name in self._types
            self._types[name] = item
            self._types[f"{NULLABLE_PREFIX}{name}"] = nullable_item
        logger.debug("Registered value type %s (replaced=%s)", name, replaced)
        return self

    def get(self, name: str) -> ValueTypeItem:
        """Return the item registered as *name*.

        Raises:
            ValueTypeNotFoundError: If *name* was never registered. An
                unknown type name is a caller bug, not bad data.
        """
        item = self._types.get(name)
        if item is None:
            raise ValueTypeNotFoundError(name)
        return item

    def has(self, name: str) -> bool:
        """Whether *name* is registered."""
        return name in self._types

    def value(
        self,
        name: str,
        value: Any,
        params: Any = None,
        format: bool | None = None,  # noqa: A002
    ) -> ValueResult:
        """Run the pipeline of type *name* on *value*."""
        return self.get(name).value(value, params, format)

    def check_params(self, name: str, params: Any) -> CheckResult:
        """Validate *params* for type *name* before using them."""
        return self.get(name).check_params(params)

    def items(self) -> Iterator[tuple[str, ValueTypeItem]]:
        """Iterate ``(name, item)`` pairs in registration order."""
        return iter(list(self._types.items()))

    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._types)
