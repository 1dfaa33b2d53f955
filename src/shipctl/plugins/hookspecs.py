"""Pluggy hook specifications for shipctl plugins.

A plugin unit takes part in ``shipctl init`` through a single setup-time
hook. Inside it the plugin taps the init extension points
(:class:`~shipctl.plugins.hooks.InitHooks`) on the initializer it receives.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from shipctl.services.init import InteractiveInit

PROJECT_NAME = "shipctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ShipctlHookSpec:
    """Hook specifications for the shipctl plugin system."""

    @hookspec
    def interactive_init(self, initializer: InteractiveInit) -> None:
        """Called once per selected plugin before any init stage runs."""
