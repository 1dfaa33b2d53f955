"""Plugins whose only init contribution is the secrets they need."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar

from shipctl.plugins.hookspecs import hookimpl
from shipctl.services.env import EnvRequest

if TYPE_CHECKING:
    from shipctl.services.init import InteractiveInit


class CredentialsPlugin:
    """Appends :attr:`ENV` to the ``create_env`` waterfall."""

    NAME: ClassVar[str] = ""
    ENV: ClassVar[tuple[tuple[str, str], ...]] = ()

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self.options = options or {}

    @hookimpl
    def interactive_init(self, initializer: InteractiveInit) -> None:
        initializer.hooks.create_env.tap(self.NAME, self._add_env)

    def _add_env(self, requests: Sequence[EnvRequest]) -> tuple[EnvRequest, ...]:
        return (
            *requests,
            *(EnvRequest(variable=variable, message=message) for variable, message in self.ENV),
        )


class CratesPlugin(CredentialsPlugin):
    NAME = "Crates"
    ENV = (("CARGO_REGISTRY_TOKEN", "Enter a crates.io API token https://crates.io/me"),)


class ChromePlugin(CredentialsPlugin):
    NAME = "Chrome Web Store"
    ENV = (
        ("CLIENT_ID", "Enter the Chrome Web Store API client id"),
        ("CLIENT_SECRET", "Enter the Chrome Web Store API client secret"),
        ("REFRESH_TOKEN", "Enter the Chrome Web Store API refresh token"),
    )


class TwitterPlugin(CredentialsPlugin):
    NAME = "Twitter"
    ENV = (
        ("TWITTER_ACCESS_TOKEN", "Enter your Twitter access token"),
        ("TWITTER_ACCESS_TOKEN_SECRET", "Enter your Twitter access token secret"),
        ("TWITTER_CONSUMER_KEY", "Enter your Twitter consumer key"),
        ("TWITTER_CONSUMER_KEY_SECRET", "Enter your Twitter consumer key secret"),
    )
