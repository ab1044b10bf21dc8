"""Subcommand modules for dasshboard.

Provides register_commands() which uses deferred imports to keep
``dasshboard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``settings`` group and the standalone commands on the root CLI group."""
    # --- Groups ---
    from dasshboard.commands.prefs import settings

    cli.add_command(settings)

    # --- Standalone commands ---
    from dasshboard.commands.diagnose import diagnose
    from dasshboard.commands.hosts import hosts
    from dasshboard.commands.open_cmd import open_cmd
    from dasshboard.commands.render import render
    from dasshboard.commands.serve import serve
    from dasshboard.commands.sync import sync

    cli.add_command(hosts)
    cli.add_command(sync)
    cli.add_command(render)
    cli.add_command(serve)
    cli.add_command(open_cmd)
    cli.add_command(diagnose)
