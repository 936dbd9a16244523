"""uxr-ds: shared design system for UXR web applications.

Bundles reusable HTML component templates, CSS tokens, a vanilla JS
bundle, and a registry of template helper functions for Jinja2.

Usage::

    from uxr_ds import build_func_map, build_template_environment, merge_func_maps

    funcs = merge_func_maps(build_func_map(), my_project_funcs)
    env = build_template_environment(extra_funcs=my_project_funcs)
"""

from __future__ import annotations

__version__ = "0.4.0"

from uxr_ds.domain.pagination import Pagination, build_pagination
from uxr_ds.infrastructure.assets import components, css, js
from uxr_ds.infrastructure.templates import build_template_environment, render_component
from uxr_ds.templating.funcmap import build_func_map, install_funcs, merge_func_maps

__all__ = [
    "Pagination",
    "__version__",
    "build_func_map",
    "build_pagination",
    "build_template_environment",
    "components",
    "css",
    "install_funcs",
    "js",
    "merge_func_maps",
    "render_component",
]
