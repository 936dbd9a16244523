"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus single-file plugins from a local directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from uxr_ds.plugins.hookspecs import hookimpl
from uxr_ds.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
