"""Command: list discovered hosts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext

HOST_TYPES = ["ssh", "wsl", "docker"]


@click.command(
    cls=DasshCommand,
    examples="""\
  dasshboard hosts
  dasshboard hosts --type docker
  dasshboard -q hosts --type ssh
  dasshboard --json hosts""",
)
@click.option(
    "--type",
    "host_type",
    type=click.Choice(HOST_TYPES),
    default=None,
    help="Only list hosts of this type.",
)
@click.pass_obj
def hosts(app: AppContext, host_type: str | None) -> None:
    """List SSH hosts, WSL distros, and Docker containers."""
    from dasshboard.domain.hosts import HostType
    from dasshboard.services.hosts import HostService

    selected = HostType(host_type) if host_type else None
    app.emit(HostService(app.workspace).list_hosts(selected))
