"""Command: add newly discovered hosts to the settings store."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.command(
    cls=DasshCommand,
    examples="""\
  dasshboard sync
  dasshboard -q sync      # print only the names that were added""",
)
@click.pass_obj
def sync(app: AppContext) -> None:
    """Record default settings for SSH hosts and WSL distros seen for the first time."""
    from dasshboard.services.reconcile import ReconcileService

    app.emit(ReconcileService(app.workspace).sync())
