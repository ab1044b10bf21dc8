"""FastAPI application wiring for the dashboard.

``GET /`` renders the page, ``POST /messages`` receives the page's
interaction messages, ``GET /health`` is a liveness probe. Icons
referenced by file name are served from the configured icon directory.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import Body, Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from dasshboard import __version__
from dasshboard.config.settings import DasshSettings
from dasshboard.infrastructure.workspace import Workspace
from dasshboard.services.dashboard import ICON_ROUTE, DashboardService

logger = logging.getLogger(__name__)


def build_app(
    settings: DasshSettings | None = None,
    *,
    workspace: Workspace | None = None,
) -> FastAPI:
    """Create a configured FastAPI instance."""
    settings = settings or DasshSettings.from_cli()
    workspace = workspace or Workspace(settings)

    app = FastAPI(title="dasshboard", version=__version__, docs_url=None, redoc_url=None)

    icon_dir = settings.dashboard.icon_dir.expanduser()
    if icon_dir.is_dir():
        app.mount(ICON_ROUTE, StaticFiles(directory=icon_dir), name="icons")

    def get_dashboard_service() -> DashboardService:
        return DashboardService(workspace)

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {
            "status": "ok",
            "version": __version__,
            "store": str(workspace.store.path),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/", response_class=HTMLResponse)
    def dashboard(svc: DashboardService = Depends(get_dashboard_service)) -> HTMLResponse:
        return HTMLResponse(svc.render_html())

    @app.post("/messages")
    def messages(
        payload: dict[str, Any] = Body(...),
        svc: DashboardService = Depends(get_dashboard_service),
    ) -> JSONResponse:
        result = svc.handle_message(payload)
        if not result.ok:
            logger.warning(
                "Dashboard message %s failed: %s",
                result.op,
                result.error.message if result.error else "unknown error",
            )
        invalid = result.error is not None and result.error.code == "INVALID_MESSAGE"
        return JSONResponse(result.model_dump(mode="json"), status_code=422 if invalid else 200)

    return app
