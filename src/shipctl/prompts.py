"""Prompt surface used by the init pipeline and by plugins.

The pipeline only talks to the :class:`Prompter` protocol. The CLI passes a
:class:`ClickPrompter`; tests pass a scripted implementation.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

import click

Validator = Callable[[dict[str, str]], "str | None"]

# Typed into a pre-filled snippet field to empty it.
CLEAR_FIELD = "-"


class PromptAborted(Exception):
    """The user aborted a prompt (Ctrl-C or end of input)."""


@dataclass(frozen=True)
class SnippetField:
    """One field of a structured multi-field prompt."""

    name: str
    label: str | None = None
    default: str | None = None

    @property
    def display(self) -> str:
        return self.label or self.name


class Prompter(Protocol):
    """Interactive capability consumed by the pipeline."""

    def confirm(self, message: str, *, default: bool = False) -> bool: ...

    def select(self, message: str, choices: Sequence[str]) -> str: ...

    def multiselect(self, message: str, choices: Mapping[str, str]) -> list[str]: ...

    def text(self, message: str, *, required: bool = True) -> str: ...

    def snippet(
        self,
        message: str,
        fields: Sequence[SnippetField],
        *,
        validate: Validator | None = None,
    ) -> dict[str, str]:
        """Ask for several fields at once.

        The form is presented again, pre-filled with the last submission,
        until *validate* returns ``None``.
        """
        ...


def required_fields(*names: str) -> Validator:
    """Validator rejecting a snippet with any of *names* left blank."""

    def _validate(values: dict[str, str]) -> str | None:
        missing = [n for n in names if not values.get(n, "").strip()]
        if missing:
            return f"{', '.join(missing)} required"
        return None

    return _validate


class ClickPrompter:
    """Prompter backed by ``click.prompt`` / ``click.confirm``."""

    def confirm(self, message: str, *, default: bool = False) -> bool:
        try:
            return click.confirm(message, default=default)
        except click.Abort:
            raise PromptAborted(message) from None

    def select(self, message: str, choices: Sequence[str]) -> str:
        click.echo(message)
        for i, choice in enumerate(choices, start=1):
            click.echo(f"  {i}. {choice}")
        try:
            raw: str = click.prompt("Choice", type=click.Choice(list(choices)), show_choices=False)
        except click.Abort:
            raise PromptAborted(message) from None
        return raw

    def multiselect(self, message: str, choices: Mapping[str, str]) -> list[str]:
        click.echo(message)
        for name, description in choices.items():
            click.echo(f"  {name:<24} {description}")
        while True:
            try:
                raw = click.prompt("Comma-separated (empty for none)", default="", show_default=False)
            except click.Abort:
                raise PromptAborted(message) from None
            picked = [item.strip() for item in raw.split(",") if item.strip()]
            unknown = [item for item in picked if item not in choices]
            if not unknown:
                return list(dict.fromkeys(picked))
            click.echo(f"Unknown choice(s): {', '.join(unknown)}", err=True)

    def text(self, message: str, *, required: bool = True) -> str:
        try:
            if required:
                return str(click.prompt(message))
            return str(click.prompt(message, default="", show_default=False))
        except click.Abort:
            raise PromptAborted(message) from None

    def snippet(
        self,
        message: str,
        fields: Sequence[SnippetField],
        *,
        validate: Validator | None = None,
    ) -> dict[str, str]:
        """Blank keeps the pre-filled value; :data:`CLEAR_FIELD` empties it."""
        current = {f.name: f.default or "" for f in fields}
        while True:
            click.echo(message)
            if any(current.values()):
                click.echo(f"  (enter {CLEAR_FIELD} to clear a field)")
            values: dict[str, str] = {}
            for f in fields:
                try:
                    answer = str(
                        click.prompt(
                            f"  {f.display}",
                            default=current[f.name],
                            show_default=bool(current[f.name]),
                        )
                    ).strip()
                except click.Abort:
                    raise PromptAborted(message) from None
                values[f.name] = "" if answer == CLEAR_FIELD else answer
            error = validate(values) if validate else None
            if error is None:
                return values
            click.echo(f"Error: {error}", err=True)
            current = values
