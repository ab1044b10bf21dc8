"""Command: render the dashboard to a static HTML file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.command(
    cls=DasshCommand,
    examples="""\
  dasshboard render > dashboard.html
  dasshboard render -o ~/dashboard.html""",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the HTML to this file instead of stdout.",
)
@click.pass_obj
def render(app: AppContext, output_path: Path | None) -> None:
    """Render the dashboard HTML.

    Without --output the document goes to stdout. Static pages cannot
    talk back; use ``dasshboard serve`` for an interactive dashboard.
    """
    from dasshboard.services.dashboard import DashboardService
    from dasshboard.services.result import ServiceError, ServiceResult

    result = DashboardService(app.workspace).render()
    if output_path is None:
        if app.settings.json_output:
            app.emit(result)
            return
        click.echo(result.data["html"], nl=False)
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
        return

    path = output_path.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.data["html"], encoding="utf-8")
    except OSError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="render",
                error=ServiceError(
                    code="WRITE_FAILED",
                    message=f"Could not write {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )
        )
        return

    app.emit(
        ServiceResult(
            ok=True,
            op="render",
            data={"path": str(path), "bytes": result.data["bytes"]},
            warnings=result.warnings,
        )
    )
