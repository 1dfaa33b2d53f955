"""Command: list the plugins offered by ``shipctl init``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext


@click.command("plugins", cls=ShipCommand, examples="  shipctl plugins\n  shipctl --json plugins")
@click.pass_obj
def plugins(app: AppContext) -> None:
    """List release and feature plugins on the init menu."""
    from shipctl.services.catalog import list_plugins

    app.emit(list_plugins(app.settings.init))
