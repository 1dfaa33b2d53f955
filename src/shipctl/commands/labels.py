"""Command: show the default label set."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shipctl.commands._base import ShipCommand

if TYPE_CHECKING:
    from shipctl.commands._context import AppContext


@click.command("labels", cls=ShipCommand, examples="  shipctl labels\n  shipctl -v labels")
@click.pass_obj
def labels(app: AppContext) -> None:
    """Show the default labels ``shipctl init`` can customize."""
    from shipctl.services.catalog import list_labels

    app.emit(list_labels())
