"""Command: interactive configuration (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  shipctl init
  shipctl init path/to/project
  shipctl --json init
  shipctl -v --log-json init"""


@click.command("init", cls=ShipCommand, examples=_INIT_EXAMPLES)
@click.argument(
    "path",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.pass_obj
def init_cmd(app: AppContext, path: Path | None) -> None:
    """Interactively write a release configuration file."""
    from shipctl.prompts import ClickPrompter
    from shipctl.services.init import InteractiveInit

    root = path.resolve() if path is not None else app.settings.project_root
    root.mkdir(parents=True, exist_ok=True)

    initializer = InteractiveInit(
        ClickPrompter(),
        root=root,
        menu=app.settings.init,
        files=app.settings.files,
    )
    app.emit(initializer.run())
