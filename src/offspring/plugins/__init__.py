"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
Plugins hook into class creation and enum registration.
"""

from offspring.plugins.hookspecs import hookimpl
from offspring.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
