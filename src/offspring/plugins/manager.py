"""PluginManager: the pluggy manager behind class and enum definition hooks.

Each :class:`~offspring.system.TypeSystem` owns one manager. With no
plugins registered, ``class_created`` and ``enum_defined`` dispatch to
nothing, which is the default no-op behavior.

Plugins come from two places:

* the embedding application, via :meth:`PluginManager.register_plugin`;
* installed distributions advertising the ``offspring.plugins`` entry
  point group. Following the pluggy convention, an entry point names a
  module (or any object) whose ``@hookimpl`` functions are registered
  as-is.
"""

from __future__ import annotations

import logging

import pluggy

from offspring.plugins.hookspecs import OffspringHookSpec

PROJECT_NAME = "offspring"
ENTRY_POINT_GROUP = "offspring.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Hook registry for one type system."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(OffspringHookSpec)
        self._loaded = False

    @property
    def hook(self) -> pluggy.HookRelay:
        """Relay used to fire ``class_created`` and ``enum_defined``."""
        return self._pm.hook

    @property
    def is_loaded(self) -> bool:
        """Whether entry-point plugins have been loaded."""
        return self._loaded

    def register_plugin(self, plugin: object, name: str | None = None) -> str:
        """Register *plugin* and return the name it was registered under.

        Modules are named after ``__name__``; other objects after their class.
        """
        resolved = name or getattr(plugin, "__name__", None) or type(plugin).__name__
        self._pm.register(plugin, name=resolved)
        logger.debug("Registered plugin %s", resolved)
        return resolved

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    def discover_and_load(self) -> list[str]:
        """Register every plugin advertised under ``offspring.plugins``.

        A broken distribution is logged and skipped; type checking keeps
        working without its hooks. Returns all registered plugin names.
        """
        try:
            count = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        except Exception:
            logger.warning("Failed to load %s entry points", ENTRY_POINT_GROUP, exc_info=True)
        else:
            logger.debug("Loaded %d plugins from %s", count, ENTRY_POINT_GROUP)
        self._loaded = True
        return self.list_plugin_names()

    def get_plugins(self) -> list[object]:
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        return [name for name, _ in self._pm.list_name_plugin()]
