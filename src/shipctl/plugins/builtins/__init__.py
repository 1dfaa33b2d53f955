"""Built-in plugin units for every identifier on the stock init menu.

Release logic lives in the release tool itself; these units only take part
in ``shipctl init``.
"""

from __future__ import annotations

from collections.abc import Callable

from shipctl.plugins.builtins.credentials import ChromePlugin, CratesPlugin, TwitterPlugin
from shipctl.plugins.builtins.npm import NpmPlugin
from shipctl.plugins.builtins.passive import PassivePlugin
from shipctl.plugins.builtins.urls import JiraPlugin, SlackPlugin

BUILTIN_PLUGINS: dict[str, Callable[..., object]] = {
    "npm": NpmPlugin,
    "crates": CratesPlugin,
    "chrome": ChromePlugin,
    "git-tag": PassivePlugin,
    "maven": PassivePlugin,
    "all-contributors": PassivePlugin,
    "conventional-commits": PassivePlugin,
    "first-time-contributor": PassivePlugin,
    "jira": JiraPlugin,
    "released": PassivePlugin,
    "slack": SlackPlugin,
    "twitter": TwitterPlugin,
}

__all__ = ["BUILTIN_PLUGINS"]
