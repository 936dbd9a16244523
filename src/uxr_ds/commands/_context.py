"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides a lazily built template environment and
centralized output emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

import click

from uxr_ds.output.formatters import format_json

if TYPE_CHECKING:
    from jinja2 import Environment

    from uxr_ds.config.settings import DsSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The template environment is built on first use so ``--help`` and
    ``--version`` never trigger plugin discovery.
    """

    def __init__(self, settings: DsSettings) -> None:
        self.settings = settings
        self._env: Environment | None = None

        from uxr_ds.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def env(self) -> Environment:
        """The Jinja2 environment (created lazily on first access)."""
        if self._env is None:
            from uxr_ds.infrastructure.templates import build_template_environment

            self._env = build_template_environment(self.settings)
        return self._env

    def emit(self, data: Any, human: str) -> None:
        """Write *data* as JSON under ``--json``, otherwise the *human* rendering."""
        if self.settings.json_output:
            click.echo(format_json(data))
        else:
            click.echo(human.rstrip("\n"))

    def fail(self, message: str) -> NoReturn:
        """Report an error on stderr and exit with code 1."""
        if self.settings.json_output:
            click.echo(format_json({"ok": False, "error": message}), err=True)
        else:
            click.echo(f"ERROR: {message}", err=True)
        raise SystemExit(1)
