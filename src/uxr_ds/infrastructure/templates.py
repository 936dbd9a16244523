"""Shared Jinja2 environment with per-application override support."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from uxr_ds.domain.components import template_for
from uxr_ds.templating.funcmap import FuncMap, build_func_map, install_funcs, merge_func_maps

if TYPE_CHECKING:
    from pydantic import BaseModel

    from uxr_ds.config.settings import DsSettings
    from uxr_ds.domain.timefmt import Clock

logger = logging.getLogger(__name__)


def collect_template_functions(
    settings: DsSettings,
    *,
    extra_funcs: Mapping[str, Callable[..., Any]] | None = None,
    clock: Clock | None = None,
) -> FuncMap:
    """Assemble the function map: shared helpers, then plugins, then *extra_funcs*.

    Each layer wins over the one before it on a name collision.
    """
    funcs = build_func_map(clock=clock)
    if settings.plugins.enabled:
        from uxr_ds.plugins.manager import PluginManager

        pm = PluginManager()
        pm.discover_and_load(local_dir=settings.plugins.local_dir)
        funcs = merge_func_maps(funcs, pm.collect_template_functions())
    if extra_funcs:
        funcs = merge_func_maps(funcs, extra_funcs)
    return funcs


def build_template_environment(
    settings: DsSettings | None = None,
    *,
    extra_funcs: Mapping[str, Callable[..., Any]] | None = None,
    clock: Clock | None = None,
) -> Environment:
    """Build a Jinja2 environment with application overrides before packaged components.

    Overrides come from ``settings.templates.override_dir``; a template
    there shadows the packaged component of the same name. When no
    settings are given they are loaded from the environment and any
    discovered ``uxr-ds.toml``.
    """
    from uxr_ds.config.settings import DsSettings

    settings = settings or DsSettings.load()

    loaders: list[BaseLoader] = []
    override_dir = settings.templates.override_dir
    if override_dir is not None:
        loaders.append(FileSystemLoader(str(override_dir)))
    loaders.append(PackageLoader("uxr_ds", "components"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=settings.templates.autoescape,
        trim_blocks=settings.templates.trim_blocks,
        lstrip_blocks=settings.templates.trim_blocks,
        keep_trailing_newline=True,
    )

    funcs = collect_template_functions(settings, extra_funcs=extra_funcs, clock=clock)
    install_funcs(env, funcs)
    logger.debug("Template environment ready with %d functions", len(funcs))
    return env


def render_component(env: Environment, model: BaseModel, *, name: str | None = None) -> str:
    """Render a component template with *model* bound as ``c``.

    The template defaults to the one associated with the model's type.
    """
    template = env.get_template(name or template_for(model))
    return template.render(c=model)
