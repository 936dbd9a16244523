"""Pluggy hook specifications for uxr-ds.

One setup-time hook lets installed packages contribute template
functions to every environment built by
:func:`uxr_ds.infrastructure.templates.build_template_environment`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pluggy

PROJECT_NAME = "uxr_ds"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class DsHookSpec:
    """Hook specifications for the uxr-ds plugin system."""

    @hookspec
    def register_template_functions(self) -> dict[str, Callable[..., Any]] | None:
        """Return name -> function entries to add to the template function map."""
