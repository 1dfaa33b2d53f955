"""npm plugin — reuse what ``package.json`` already declares.

If ``package.json`` names a repository or an author with an email, the
release tool reads them from there at release time, so the corresponding
init questions are answered with ``True`` (verified, nothing to record).
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from shipctl.plugins.hookspecs import hookimpl
from shipctl.services.env import EnvRequest

if TYPE_CHECKING:
    from shipctl.services.init import InteractiveInit

logger = logging.getLogger(__name__)

# "Name <email> (url)" shorthand used by npm for people fields.
_PERSON_RE = re.compile(r"^(?P<name>[^<(]+?)?\s*(?:<(?P<email>[^>]+)>)?\s*(?:\((?P<url>[^)]+)\))?$")


def read_package_json(root: Path) -> dict[str, Any]:
    """Parsed ``package.json`` in *root*, or ``{}`` if missing or invalid."""
    path = root / "package.json"
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        logger.warning("Ignoring invalid %s", path)
        return {}
    return data if isinstance(data, dict) else {}


def parse_person(value: Any) -> tuple[str | None, str | None]:
    """Return ``(name, email)`` from an npm person field (string or object)."""
    if isinstance(value, dict):
        return value.get("name"), value.get("email")
    if isinstance(value, str):
        match = _PERSON_RE.match(value.strip())
        if match:
            name = match.group("name")
            return (name.strip() if name else None), match.group("email")
    return None, None


def repository_url(value: Any) -> str | None:
    if isinstance(value, dict):
        value = value.get("url")
    return value if isinstance(value, str) and value.strip() else None


class NpmPlugin:
    """Publishes to npm; answers repo/author questions from ``package.json``."""

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self.options = options or {}
        self._root: Path | None = None

    @hookimpl
    def interactive_init(self, initializer: InteractiveInit) -> None:
        self._root = initializer.root
        initializer.hooks.get_repo.tap("NPM", self._get_repo)
        initializer.hooks.get_author.tap("NPM", self._get_author)
        initializer.hooks.create_env.tap("NPM", self._add_env)

    def _package(self) -> dict[str, Any]:
        return read_package_json(self._root) if self._root is not None else {}

    def _get_repo(self) -> bool | None:
        if repository_url(self._package().get("repository")):
            return True
        return None

    def _get_author(self) -> bool | None:
        name, email = parse_person(self._package().get("author"))
        if name and email:
            return True
        return None

    def _add_env(self, requests: Sequence[EnvRequest]) -> tuple[EnvRequest, ...]:
        return (
            *requests,
            EnvRequest(
                variable="NPM_TOKEN",
                message="Enter a npm token https://docs.npmjs.com/creating-and-viewing-access-tokens",
            ),
        )
