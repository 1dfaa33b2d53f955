"""Extension layer — init extension points and plugin loading via pluggy.

Resolution: built-in plugin table first, then the ``shipctl.plugins``
entry-point group.
INVARIANT: An identifier that resolves nowhere aborts the init run.
"""

from shipctl.plugins.hooks import BailHook, HookError, InitHooks, WaterfallHook, make_init_hooks
from shipctl.plugins.hookspecs import hookimpl
from shipctl.plugins.manager import PluginManager, PluginResolutionError

__all__ = [
    "BailHook",
    "HookError",
    "InitHooks",
    "PluginManager",
    "PluginResolutionError",
    "WaterfallHook",
    "hookimpl",
    "make_init_hooks",
]
