"""DashboardService — render the dashboard page and handle its messages.

Rendering runs a full reconciliation pass first, so a host seen for the
first time is already in the store when its card is drawn. The page then
talks back through :meth:`DashboardService.handle_message`.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from pydantic import ValidationError

from dasshboard import __version__
from dasshboard.config.discovery import default_config_dir
from dasshboard.domain.colors import SECTION_PALETTE, hue
from dasshboard.domain.hosts import (
    DiscoveredHosts,
    Host,
    HostType,
    connection_detail,
    display_folders,
)
from dasshboard.domain.messages import (
    MESSAGE_ADAPTER,
    GetHostSettingsMessage,
    OpenFolderMessage,
    OpenSettingsMessage,
    OpenSshConfigMessage,
    UpdateHostIconMessage,
    UpdateLayoutMessage,
    UpdateSectionCollapsedMessage,
    UpdateSectionColorMessage,
)
from dasshboard.domain.preferences import DashboardSettings
from dasshboard.domain.uris import detect_remote
from dasshboard.infrastructure.templates import build_template_environment
from dasshboard.services.base import BaseService
from dasshboard.services.launch import LaunchService
from dasshboard.services.preferences import PreferencesService
from dasshboard.services.reconcile import ReconcileService
from dasshboard.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

DEFAULT_HOST_ICON = "lucide:server"
DOCKER_ICON = "lucide:container"
ICON_ROUTE = "/icons"

_LUCIDE_RE = re.compile(r"^lucide:(.+)$", re.IGNORECASE)

_SECTION_TITLES: dict[HostType, str] = {
    HostType.SSH: "SSH Remote Hosts",
    HostType.WSL: "WSL Distros",
    HostType.DOCKER: "Docker Containers",
}

_SECTION_ICONS: dict[HostType, str] = {
    HostType.SSH: "monitor",
    HostType.WSL: "terminal",
    HostType.DOCKER: "container",
}


def _icon_view(icon: str) -> dict[str, str]:
    """``lucide:<name>`` renders a Lucide icon; anything else is an SVG file."""
    match = _LUCIDE_RE.match(icon)
    if match:
        return {"kind": "lucide", "name": match.group(1).strip()}
    filename = icon if icon.endswith(".svg") else f"{icon}.svg"
    return {"kind": "file", "url": f"{ICON_ROUTE}/{filename}"}


def _card_view(host: Host) -> dict[str, Any]:
    is_docker = host.type is HostType.DOCKER
    color = "" if is_docker else host.settings.color
    icon = DOCKER_ICON if is_docker else (host.settings.icon or DEFAULT_HOST_ICON)
    return {
        "name": host.name,
        "type": host.type.value,
        "badge": host.type.value.upper(),
        "detail": connection_detail(host),
        "status": host.container_status,
        "color": color,
        "hue": hue(color) if color else 0.0,
        "clickable": not is_docker,
        "icon": _icon_view(icon),
        "folders": display_folders(host),
    }


def _palette_view(current: str) -> list[dict[str, Any]]:
    return [
        {
            "value": value,
            "display": value or "var(--link-color)",
            "title": value or "Theme default",
            "selected": value == current,
        }
        for value in SECTION_PALETTE
    ]


def _section_views(hosts: DiscoveredHosts, stored: DashboardSettings) -> list[dict[str, Any]]:
    sections: list[dict[str, Any]] = []
    for host_type in HostType:
        members = hosts.by_type(host_type)
        if not members:
            continue
        color = stored.section_color(host_type)
        sections.append(
            {
                "type": host_type.value,
                "title": _SECTION_TITLES[host_type],
                "icon": _SECTION_ICONS[host_type],
                "count": len(members),
                "color": color,
                "collapsed": stored.is_collapsed(host_type),
                "palette": _palette_view(color),
                "cards": [_card_view(h) for h in members],
            }
        )
    return sections


class DashboardService(BaseService):
    """Builds the dashboard HTML and dispatches the page's messages."""

    def build_context(self, warnings: list[str]) -> dict[str, Any]:
        """Template context after one reconciliation pass."""
        stored, hosts, _added = ReconcileService(self._workspace).reconcile(warnings)
        settings = self._workspace.settings
        remote = detect_remote(settings.editor.remote_name)
        return {
            "title": settings.dashboard.title,
            "version": __version__,
            "layout": stored.layout.value,
            "sections": _section_views(hosts, stored),
            "counts": hosts.counts(),
            "remote": remote,
            "remote_color": stored.section_color(remote.host_type) if remote.host_type else "",
            "palette": list(SECTION_PALETTE[1:]),
            "warnings": warnings,
        }

    def render_html(self, warnings: list[str] | None = None) -> str:
        """The complete dashboard document. Always renders, even with no hosts."""
        warnings = warnings if warnings is not None else []
        env = build_template_environment("dashboard", config_dir=default_config_dir())
        template = env.get_template("dashboard.html.j2")
        return template.render(**self.build_context(warnings))

    def render(self) -> ServiceResult:
        """Render the dashboard into a ServiceResult (``data.html``)."""
        warnings: list[str] = []
        html = self.render_html(warnings)
        return ServiceResult(
            ok=True,
            op="render",
            data={"html": html, "bytes": len(html.encode("utf-8"))},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def handle_message(self, payload: dict[str, Any]) -> ServiceResult:
        """Validate and dispatch one message posted by the dashboard page.

        Results of messages that change what the page shows carry
        ``data.reload = True``.
        """
        try:
            message = MESSAGE_ADAPTER.validate_python(payload)
        except ValidationError as exc:
            command = payload.get("command") if isinstance(payload, dict) else None
            logger.debug("Rejected dashboard message %r: %s", command, exc)
            return ServiceResult(
                ok=False,
                op=str(command or "message"),
                error=ServiceError(
                    code="INVALID_MESSAGE",
                    message=f"Invalid dashboard message: {command!r}",
                    detail={"errors": exc.errors(include_url=False, include_context=False)},
                ),
            )

        logger.debug("Dashboard message %s", message.command)
        prefs = PreferencesService(self._workspace)
        launch = LaunchService(self._workspace)

        if isinstance(message, OpenFolderMessage):
            return launch.open_folder(
                message.host,
                message.folder,
                host_type=message.host_type,
                new_window=message.new_window,
            )
        if isinstance(message, OpenSshConfigMessage):
            return launch.open_ssh_config()
        if isinstance(message, OpenSettingsMessage):
            return launch.open_settings()
        if isinstance(message, UpdateLayoutMessage):
            # The page already rearranged itself; nothing to reload.
            return prefs.set_layout(message.layout)
        if isinstance(message, GetHostSettingsMessage):
            return prefs.get_host(message.host, message.host_type)

        if isinstance(message, UpdateSectionColorMessage):
            result = prefs.set_section(message.section, color=message.color)
        elif isinstance(message, UpdateSectionCollapsedMessage):
            result = prefs.set_section(message.section, collapsed=message.collapsed)
        else:
            assert isinstance(message, UpdateHostIconMessage)
            result = prefs.set_host(message.host, icon=message.icon, color=message.color)

        if not result.ok:
            return result
        return result.model_copy(update={"data": {**result.data, "reload": True}})
