"""Plugin resolution and initialization.

Resolution order for an identifier: already-registered unit, built-in
plugin table, then the ``shipctl.plugins`` entry-point group via pluggy.
Each resolved unit is registered with pluggy under its identifier and
initialized through the ``interactive_init`` hook, one unit at a time, so
plugins tap the init extension points in selection order.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

import pluggy

from shipctl.plugins.builtins import BUILTIN_PLUGINS
from shipctl.plugins.hooks import HookError
from shipctl.plugins.hookspecs import PROJECT_NAME, ShipctlHookSpec
from shipctl.prompts import PromptAborted

if TYPE_CHECKING:
    from shipctl.services.init import InteractiveInit

ENTRY_POINT_GROUP = "shipctl.plugins"

logger = logging.getLogger(__name__)


class PluginResolutionError(Exception):
    """A plugin identifier could not be turned into a loaded unit."""

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        self.identifier = identifier
        self.reason = reason
        msg = f"Could not find plugin {identifier!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class PluginManager:
    """Resolves plugin identifiers to units and runs their init entry point."""

    def __init__(self, builtins: Mapping[str, Callable[..., object]] | None = None) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ShipctlHookSpec)
        self._builtins = dict(BUILTIN_PLUGINS if builtins is None else builtins)

    def resolve(self, identifier: str, options: dict[str, Any] | None = None) -> object:
        """Return the loaded unit for *identifier*.

        Raises:
            PluginResolutionError: No built-in or entry point matches, or the
                entry point failed to load.
        """
        existing = self._pm.get_plugin(identifier)
        if existing is not None:
            return existing

        factory = self._builtins.get(identifier)
        if factory is not None:
            plugin = _instantiate(factory, options)
            self.register_plugin(plugin, name=identifier)
            return plugin

        try:
            loaded = self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP, name=identifier)
        except Exception as exc:
            raise PluginResolutionError(identifier, str(exc)) from exc

        plugin = self._pm.get_plugin(identifier) if loaded else None
        if plugin is None:
            raise PluginResolutionError(identifier)

        if inspect.isclass(plugin):
            # Entry points may expose the class; hook dispatch needs an instance.
            self._pm.unregister(plugin)
            plugin = _instantiate(plugin, options)
            self._pm.register(plugin, name=identifier)
        logger.debug("Loaded plugin %s from entry point", identifier)
        return plugin

    def initialize(self, plugin: object, initializer: InteractiveInit) -> None:
        """Run *plugin*'s ``interactive_init`` hook, if it implements one.

        Raises:
            HookError: The plugin's init entry point raised.
            PromptAborted: The user aborted a prompt the plugin asked.
        """
        name = self._pm.get_name(plugin) or plugin.__class__.__name__
        others = [p for p in self._pm.get_plugins() if p is not plugin]
        caller = self._pm.subset_hook_caller("interactive_init", remove_plugins=others)
        try:
            caller(initializer=initializer)
        except PromptAborted:
            raise
        except Exception as exc:
            logger.warning("Plugin %s failed to initialize", name, exc_info=True)
            raise HookError("interactive_init", name, exc) from exc
        logger.debug("Initialized plugin %s", name)

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. built-in plugins)."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def get_plugin(self, identifier: str) -> object | None:
        return self._pm.get_plugin(identifier)

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def is_resolvable(self, identifier: str) -> bool:
        """Whether *identifier* names a built-in or an installed entry point."""
        if identifier in self._builtins or self._pm.get_plugin(identifier) is not None:
            return True
        from importlib.metadata import entry_points

        return any(ep.name == identifier for ep in entry_points(group=ENTRY_POINT_GROUP))


def _instantiate(factory: Callable[..., object], options: dict[str, Any] | None) -> object:
    """Call *factory* with the options payload if it accepts one."""
    try:
        params = inspect.signature(factory).parameters
    except (TypeError, ValueError):
        params = {}
    if "options" in params:
        return factory(options=dict(options or {}))
    return factory()
