"""Shared pytest fixtures and test helpers for shipctl tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from shipctl.prompts import PromptAborted, SnippetField, Validator


class ScriptedPrompter:
    """Prompter answering from a fixed script, in order.

    * ``confirm`` expects a bool, ``select`` / ``text`` a str,
      ``multiselect`` a list, ``snippet`` a dict merged over the field
      defaults (``{}`` accepts the defaults).
    * A snippet answer rejected by the validator consumes the next answer,
      like a user re-submitting the form.
    * Running out of answers raises :class:`PromptAborted` (end of input).

    Every prompt is recorded in :attr:`calls` as ``(kind, message)``.
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers: list[Any] = list(answers)
        self.calls: list[tuple[str, str]] = []
        self.errors: list[str] = []
        self.snippet_fields: list[list[SnippetField]] = []

    def _next(self, kind: str, message: str, expected: type | tuple[type, ...]) -> Any:
        self.calls.append((kind, message))
        if not self.answers:
            raise PromptAborted(message)
        answer = self.answers.pop(0)
        assert isinstance(answer, expected), f"{kind} {message!r} got {answer!r}"
        return answer

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return self._next("confirm", message, bool)

    def select(self, message: str, choices: Sequence[str]) -> str:
        answer = self._next("select", message, str)
        assert answer in choices, f"{answer!r} not in {list(choices)}"
        return answer

    def multiselect(self, message: str, choices: Mapping[str, str]) -> list[str]:
        answer = self._next("multiselect", message, list)
        assert all(a in choices for a in answer), answer
        return answer

    def text(self, message: str, *, required: bool = True) -> str:
        return self._next("text", message, str)

    def snippet(
        self,
        message: str,
        fields: Sequence[SnippetField],
        *,
        validate: Validator | None = None,
    ) -> dict[str, str]:
        self.snippet_fields.append(list(fields))
        while True:
            answer = self._next("snippet", message, dict)
            values = {f.name: f.default or "" for f in fields}
            values.update(answer)
            error = validate(values) if validate else None
            if error is None:
                return values
            self.errors.append(error)

    @property
    def exhausted(self) -> bool:
        return not self.answers


@pytest.fixture(autouse=True)
def _isolate_logging() -> Iterator[None]:
    """Undo the root handler swap done by ``configure_logging`` in CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    ship_level = logging.getLogger("shipctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("shipctl").setLevel(ship_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory used as CWD, isolated from any shipctl.toml."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    monkeypatch.delenv("SHIPCTL_CONFIG", raising=False)
    return root


# ---------------------------------------------------------------------------
# Shared answer scripts
# ---------------------------------------------------------------------------


def minimal_answers(
    release: str = "npm Package",
    features: list[str] | None = None,
    *,
    repo: dict[str, str] | None = None,
    author: dict[str, str] | None = None,
) -> list[Any]:
    """Answers declining every optional question.

    Order: release plugin, feature plugins, repo, author, release-label gate,
    enterprise, create .env (declined), customize labels, add labels.
    """
    return [
        release,
        features or [],
        repo if repo is not None else {"owner": "foo", "repo": "bar"},
        author if author is not None else {"name": "A", "email": "a@x.com"},
        False,
        False,
        False,
        False,
        False,
    ]
