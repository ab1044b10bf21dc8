"""Command: report what discovery can see from this machine."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.command(cls=DasshCommand, examples="  dasshboard diagnose\n  dasshboard --json diagnose")
@click.pass_obj
def diagnose(app: AppContext) -> None:
    """Show platform, tool availability, and discovered hosts."""
    from dasshboard.services.hosts import HostService

    app.emit(HostService(app.workspace).diagnose())
