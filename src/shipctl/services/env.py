"""Env materializer — turn requested variables into a local ``.env`` file.

Pipeline: READ existing state → FILTER already-present variables → CONFIRM →
ASK each value in order → APPEND ``NAME=value`` lines → IGNORE the file in git.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict

from shipctl.infrastructure.filesystem import append_lines, ensure_line

if TYPE_CHECKING:
    from shipctl.prompts import Prompter

logger = logging.getLogger(__name__)

GH_TOKEN_REQUEST_MESSAGE = (
    "Enter a personal access token for the GitHub API "
    "https://github.com/settings/tokens/new"
)


class EnvRequest(BaseModel):
    """A variable the user should be asked for."""

    model_config = ConfigDict(frozen=True)

    variable: str
    message: str


@dataclass
class EnvOutcome:
    """What the materializer did."""

    created: bool = False
    variables: list[str] = field(default_factory=list)
    ignore_updated: bool = False


def read_env_names(path: Path) -> set[str]:
    """Names of the variables already present in *path* (empty if missing)."""
    if not path.is_file():
        return set()
    return set(dotenv_values(path))


def dedupe_requests(requests: Iterable[EnvRequest], present: set[str]) -> list[EnvRequest]:
    """Drop requests for variables in *present* or requested earlier."""
    seen = set(present)
    pending: list[EnvRequest] = []
    for request in requests:
        if request.variable in seen:
            continue
        seen.add(request.variable)
        pending.append(request)
    return pending


class EnvMaterializer:
    """Asks for missing variables and writes them to the env artifact."""

    def __init__(self, prompter: Prompter, env_path: Path, ignore_path: Path) -> None:
        self._prompter = prompter
        self._env_path = env_path
        self._ignore_path = ignore_path

    def pending(self, requests: Sequence[EnvRequest]) -> list[EnvRequest]:
        return dedupe_requests(requests, read_env_names(self._env_path))

    def materialize(self, requests: Sequence[EnvRequest]) -> EnvOutcome:
        outcome = EnvOutcome()
        pending = self.pending(requests)
        if not pending:
            logger.debug("All %d requested variable(s) already present", len(requests))
            return outcome

        should_create = self._prompter.confirm(
            f"Would you like to create an {self._env_path.name} file? "
            "This makes it easy to test and use shipctl locally.",
            default=True,
        )
        if not should_create:
            return outcome

        lines: list[str] = []
        for request in pending:
            value = self._prompter.text(request.message, required=True)
            lines.append(f"{request.variable}={value}")
            outcome.variables.append(request.variable)

        append_lines(self._env_path, lines)
        outcome.created = True
        outcome.ignore_updated = ensure_line(self._ignore_path, self._env_path.name)
        logger.debug(
            "Wrote %d variable(s) to %s (ignore list updated: %s)",
            len(lines),
            self._env_path,
            outcome.ignore_updated,
        )
        return outcome
