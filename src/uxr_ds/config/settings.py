"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags or keyword overrides from the host application
  2. Env vars: ``UXR_DS_*`` prefix
  3. TOML file: ``uxr-ds.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`uxr_ds.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from uxr_ds.config.discovery import find_config
from uxr_ds.config.models import PluginsConfig, TemplatesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``uxr-ds.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DsSettings(BaseSettings):
    """Settings for the template environment, plugins, and CLI output.

    Attributes:
        config_path: The ``uxr-ds.toml`` in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "UXR_DS_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> DsSettings:
        """Construct settings, discovering ``uxr-ds.toml`` unless one is given.

        Relative directories in the TOML file are resolved against the
        file's parent directory.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

        if toml_path is None:
            return settings
        return settings._resolve_paths(toml_path.parent)

    def _resolve_paths(self, base: Path) -> DsSettings:
        templates = self.templates
        if templates.override_dir is not None and not templates.override_dir.is_absolute():
            templates = templates.model_copy(
                update={"override_dir": base / templates.override_dir}
            )
        plugins = self.plugins
        if plugins.local_dir is not None and not plugins.local_dir.is_absolute():
            plugins = plugins.model_copy(update={"local_dir": base / plugins.local_dir})
        return self.model_copy(update={"templates": templates, "plugins": plugins})
