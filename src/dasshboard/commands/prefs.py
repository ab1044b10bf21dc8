"""Command group: inspect and edit stored dashboard settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshGroup
from dasshboard.commands.hosts import HOST_TYPES

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.group(
    cls=DasshGroup,
    examples="""\
  dasshboard settings show
  dasshboard settings host prod --icon lucide:database --color '#e06c75'
  dasshboard settings host prod --folder /srv/app --folder /var/log
  dasshboard settings section docker --collapse
  dasshboard settings layout list""",
)
def settings() -> None:
    """Inspect and edit per-host and dashboard settings."""


@settings.command(
    examples="""\
  dasshboard settings show
  dasshboard settings show prod
  dasshboard --json settings show""",
)
@click.argument("host", required=False)
@click.pass_obj
def show(app: AppContext, host: str | None) -> None:
    """Show the stored settings, or one HOST's entry."""
    from dasshboard.services.preferences import PreferencesService

    app.emit(PreferencesService(app.workspace).show(host))


@settings.command(
    examples="""\
  dasshboard settings host prod --icon lucide:database
  dasshboard settings host prod --color '#61afef'
  dasshboard settings host prod --color ''          # back to the theme color
  dasshboard settings host prod --folder /srv/app --folder /var/log""",
)
@click.argument("host")
@click.option("--icon", default=None, help="Icon id (lucide:<name>) or SVG file name.")
@click.option("--color", default=None, help="Accent color; empty string clears it.")
@click.option("--folder", "folders", multiple=True, help="Folder to offer (repeatable).")
@click.pass_obj
def host(
    app: AppContext,
    host: str,
    icon: str | None,
    color: str | None,
    folders: tuple[str, ...],
) -> None:
    """Set HOST's icon, color, or folder list."""
    from dasshboard.services.preferences import PreferencesService

    app.emit(
        PreferencesService(app.workspace).set_host(
            host,
            icon=icon,
            color=color,
            folders=list(folders) if folders else None,
        )
    )


@settings.command(
    examples="""\
  dasshboard settings section ssh --color '#c678dd'
  dasshboard settings section wsl --collapse
  dasshboard settings section wsl --expand""",
)
@click.argument("section", type=click.Choice(HOST_TYPES))
@click.option("--color", default=None, help="Section accent color; empty string clears it.")
@click.option("--collapse/--expand", "collapsed", default=None, help="Collapse or expand the section.")
@click.pass_obj
def section(app: AppContext, section: str, color: str | None, collapsed: bool | None) -> None:
    """Set a dashboard SECTION's color or collapsed state."""
    from dasshboard.domain.hosts import HostType
    from dasshboard.services.preferences import PreferencesService

    if color is None and collapsed is None:
        raise click.UsageError("Nothing to change; pass --color, --collapse, or --expand.")
    app.emit(
        PreferencesService(app.workspace).set_section(
            HostType(section), color=color, collapsed=collapsed
        )
    )


@settings.command(examples="  dasshboard settings layout grid\n  dasshboard settings layout list")
@click.argument("layout", type=click.Choice(["grid", "list"]))
@click.pass_obj
def layout(app: AppContext, layout: str) -> None:
    """Switch the dashboard between grid and list LAYOUT."""
    from dasshboard.domain.preferences import Layout
    from dasshboard.services.preferences import PreferencesService

    app.emit(PreferencesService(app.workspace).set_layout(Layout(layout)))
