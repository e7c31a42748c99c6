"""Pluggy hook specifications for valuetypes.

One setup-time hook lets plugins add value types to a manager after the
built-in catalog has been seeded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from valuetypes.domain.manager import ValueTypeManager

PROJECT_NAME = "valuetypes"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ValueTypesHookSpec:
    """Hook specifications for the valuetypes plugin system."""

    @hookspec
    def register_value_types(self, manager: ValueTypeManager) -> None:
        """Register custom types on *manager* via ``manager.register(...)``.

        Registering an existing name replaces it, built-ins included.
        """
