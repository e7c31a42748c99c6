"""Compose a ready-to-use ValueTypeManager from settings.

Order matters because registration is last-write-wins:
built-in catalog, then ``[types]`` from valuetypes.toml, then plugins.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from valuetypes.domain.manager import ValueTypeManager
from valuetypes.plugins.builtins.pattern_types import PatternTypesPlugin
from valuetypes.plugins.manager import PluginManager

if TYPE_CHECKING:
    from valuetypes.config.settings import ValueTypesSettings

logger = logging.getLogger(__name__)


def build_plugin_manager(settings: ValueTypesSettings) -> PluginManager:
    """Register the config-declared types plugin, then discover external ones."""
    plugins = PluginManager()
    plugins.register_plugin(PatternTypesPlugin(settings.types), name="pattern_types")
    if settings.plugins.enabled:
        plugins.discover_and_load(local_dir=settings.local_plugin_dir)
    return plugins


def build_manager(settings: ValueTypesSettings) -> ValueTypeManager:
    """Build a manager according to *settings*."""
    manager = ValueTypeManager(
        disable_builtin_types=settings.manager.disable_builtin_types,
    )
    applied = build_plugin_manager(settings).apply(manager)
    logger.debug("Built value type manager: %d types, plugins=%s", len(manager), applied)
    return manager
