"""Template function registry shared by every consuming application."""

from uxr_ds.templating.funcmap import FuncMap, build_func_map, install_funcs, merge_func_maps

__all__ = ["FuncMap", "build_func_map", "install_funcs", "merge_func_maps"]
