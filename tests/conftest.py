"""Shared pytest fixtures for uxr-ds tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner
from jinja2 import Environment

from uxr_ds.config.models import PluginsConfig
from uxr_ds.config.settings import DsSettings
from uxr_ds.domain.timefmt import Clock
from uxr_ds.infrastructure.templates import build_template_environment

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """The instant every test clock reports."""
    return FIXED_NOW


@pytest.fixture
def fixed_clock(fixed_now: datetime) -> Clock:
    """A clock frozen at :data:`FIXED_NOW`."""
    return lambda: fixed_now


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path]:
    """Run in an empty temp directory with no config env vars set.

    Keeps walk-up discovery from finding a ``uxr-ds.toml`` outside the test.
    """
    monkeypatch.chdir(tmp_path)
    for var in ("UXR_DS_CONFIG", "UXR_DS_VERBOSE", "UXR_DS_JSON_OUTPUT", "UXR_DS_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    yield tmp_path


@pytest.fixture
def settings(_isolated_cwd: Path) -> DsSettings:
    """Default settings with plugin discovery disabled."""
    return DsSettings.load(start=_isolated_cwd, plugins=PluginsConfig(enabled=False))


@pytest.fixture
def env(settings: DsSettings, fixed_clock: Clock) -> Environment:
    """Template environment over the packaged components with a fixed clock."""
    return build_template_environment(settings, clock=fixed_clock)
