"""Plugins that need a service URL recorded in their plugin options."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from shipctl.plugins.hookspecs import hookimpl
from shipctl.services.env import EnvRequest

if TYPE_CHECKING:
    from shipctl.domain.rc import PluginEntry
    from shipctl.services.init import InteractiveInit


class UrlPlugin:
    """Answers ``configure_plugin`` for :attr:`IDENTIFIER` with ``[id, {"url": ...}]``.

    A ``url`` already present in the options payload is used as is.
    """

    IDENTIFIER: ClassVar[str] = ""
    NAME: ClassVar[str] = ""
    QUESTION: ClassVar[str] = ""

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self.options = options or {}
        self._initializer: InteractiveInit | None = None

    @hookimpl
    def interactive_init(self, initializer: InteractiveInit) -> None:
        self._initializer = initializer
        initializer.hooks.configure_plugin.tap(self.NAME, self._configure)

    def _configure(self, identifier: str) -> PluginEntry | None:
        if identifier != self.IDENTIFIER or self._initializer is None:
            return None
        url = self.options.get("url") or self._initializer.prompter.text(self.QUESTION)
        return (self.IDENTIFIER, {**self.options, "url": url})


class JiraPlugin(UrlPlugin):
    IDENTIFIER = "jira"
    NAME = "Jira"
    QUESTION = "What is the root url of your Jira instance?"


class SlackPlugin(UrlPlugin):
    IDENTIFIER = "slack"
    NAME = "Slack"
    QUESTION = "What slack url would you like to post to?"

    @hookimpl
    def interactive_init(self, initializer: InteractiveInit) -> None:
        super().interactive_init(initializer)
        initializer.hooks.create_env.tap(self.NAME, self._add_env)

    def _add_env(self, requests: Sequence[EnvRequest]) -> tuple[EnvRequest, ...]:
        return (
            *requests,
            EnvRequest(variable="SLACK_TOKEN", message="Enter a Slack app token"),
        )
