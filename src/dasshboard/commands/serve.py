"""serve — run the interactive dashboard on a local web server."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dasshboard.commands._base import DasshCommand

if TYPE_CHECKING:
    from dasshboard.commands._context import AppContext


@click.command(
    cls=DasshCommand,
    examples="""\
  # Serve on the configured address and open a browser tab
  dasshboard serve

  # Custom port, no browser
  dasshboard serve --port 9000 --no-browser""",
)
@click.option("--host", default=None, help="Bind address (default from [server] config).")
@click.option("--port", default=None, type=int, help="Listen port (default from [server] config).")
@click.option("--no-browser", is_flag=True, help="Do not open the dashboard in a browser.")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None, no_browser: bool) -> None:
    """Serve the dashboard; button clicks open folders in the editor."""
    import uvicorn

    from dasshboard.web.app import build_app

    server = app.settings.server
    bind_host = host or server.host
    bind_port = port or server.port
    url = f"http://{bind_host}:{bind_port}/"

    web_app = build_app(app.settings, workspace=app.workspace)
    click.echo(f"Serving dasshboard at {url}", err=True)
    if server.open_browser and not no_browser:
        click.launch(url)
    uvicorn.run(web_app, host=bind_host, port=bind_port, log_config=None)
