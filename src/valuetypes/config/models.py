"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valuetypes.toml only contains
overrides. An empty file (or no file at all) yields a manager seeded with the
built-in catalog and entry-point plugins enabled.
"""

from __future__ import annotations

from pydantic import BaseModel

from valuetypes.domain.options import SwaggerType

# --- valuetypes.toml sections ---


class ManagerConfig(BaseModel):
    """[manager] section."""

    model_config = {"frozen": True}

    disable_builtin_types: bool = False


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".valuetypes/plugins"


class PatternTypeConfig(BaseModel):
    """[types.<Name>] section — a type declared by a regular expression."""

    model_config = {"frozen": True}

    pattern: str
    description: str = ""
    ts_type: str = "string"
    swagger_type: SwaggerType = "string"
    is_default_format: bool = False
    trim: bool = False
