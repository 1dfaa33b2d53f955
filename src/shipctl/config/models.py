"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shipctl.toml only contains overrides.
A project needs no shipctl.toml at all to run ``shipctl init``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Menu label -> plugin identifier.
DEFAULT_RELEASE_PLUGINS: dict[str, str] = {
    "Chrome Web Store": "chrome",
    "Rust Crate": "crates",
    "Git Tag": "git-tag",
    "npm Package": "npm",
    "Maven": "maven",
}

# Plugin identifier -> menu description.
DEFAULT_FEATURE_PLUGINS: dict[str, str] = {
    "all-contributors": (
        "All Contributors - Automatically add contributors as changelogs are produced"
    ),
    "conventional-commits": "Conventional Commits - Parse conventional commit messages",
    "first-time-contributor": (
        "First Time Contributor - Thank first time contributors for their work "
        "right in your release notes"
    ),
    "jira": "Jira - Include Jira story information",
    "released": "Released - Mark PRs as released",
    "slack": "Slack - Post your release notes to a slack channel",
    "twitter": "Twitter - Post tweets after a release is made",
}


class InitConfig(BaseModel):
    """[init] section — the plugin menus offered by ``shipctl init``."""

    model_config = {"frozen": True}

    release_plugins: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_RELEASE_PLUGINS)
    )
    feature_plugins: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_FEATURE_PLUGINS)
    )


class FilesConfig(BaseModel):
    """[files] section — artifact names, relative to the project root."""

    model_config = {"frozen": True}

    rc_file: str = ".shiprc"
    env_file: str = ".env"
    ignore_file: str = ".gitignore"
