"""Command: open a folder on a host in the editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand
from dasshboard.commands.hosts import HOST_TYPES

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.command(
    "open",
    cls=DasshCommand,
    examples="""\
  dasshboard open prod
  dasshboard open prod /srv/app --new-window
  dasshboard open Ubuntu /home/me/src --type wsl
  dasshboard open web --type docker""",
)
@click.argument("host")
@click.argument("folder", required=False)
@click.option(
    "--type",
    "host_type",
    type=click.Choice(HOST_TYPES),
    default="ssh",
    show_default=True,
    help="Kind of host.",
)
@click.option("--new-window", is_flag=True, help="Open in a new editor window.")
@click.pass_obj
def open_cmd(
    app: AppContext,
    host: str,
    folder: str | None,
    host_type: str,
    new_window: bool,
) -> None:
    """Open FOLDER on HOST; defaults to the host's first stored folder."""
    from dasshboard.domain.hosts import HostType
    from dasshboard.services.launch import LaunchService

    svc = LaunchService(app.workspace)
    app.emit(svc.open_folder(host, folder, host_type=HostType(host_type), new_window=new_window))
