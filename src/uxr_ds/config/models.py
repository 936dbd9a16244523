"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``uxr-ds.toml`` only contains
overrides. Most applications need no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class TemplatesConfig(BaseModel):
    """[templates] section."""

    model_config = {"frozen": True}

    override_dir: Path | None = None
    autoescape: bool = True
    trim_blocks: bool = True


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: Path | None = None


class DsConfig(BaseModel):
    """Root model for the whole ``uxr-ds.toml`` file."""

    model_config = {"frozen": True}

    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
