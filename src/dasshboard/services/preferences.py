"""PreferencesService — read and update the persisted dashboard settings."""

from __future__ import annotations

from dasshboard.domain.colors import parse_rgb
from dasshboard.domain.hosts import HostSettings, HostType
from dasshboard.domain.preferences import Layout
from dasshboard.services.base import BaseService
from dasshboard.services.result import ServiceError, ServiceResult


def _invalid_color(op: str, color: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="INVALID_COLOR",
            message=f"Unrecognised color {color!r}; use #rgb, #rrggbb or rgb(r, g, b)",
            detail={"color": color},
        ),
    )


class PreferencesService(BaseService):
    """Mutations behind the ``settings`` commands and dashboard messages."""

    def show(self, host: str | None = None) -> ServiceResult:
        """The whole settings record, or one host's entry."""
        stored = self._workspace.store.load()
        if host is not None:
            if host not in stored.hosts:
                return ServiceResult(
                    ok=False,
                    op="show_settings",
                    error=ServiceError(
                        code="HOST_NOT_FOUND",
                        message=f"No settings stored for host {host!r}",
                        detail={"host": host},
                    ),
                )
            return ServiceResult(
                ok=True,
                op="host_settings",
                data={"host": host, **stored.hosts[host].model_dump()},
            )
        return ServiceResult(
            ok=True,
            op="show_settings",
            data={"store": str(self._workspace.store.path), **stored.model_dump(mode="json")},
        )

    def get_host(self, host: str, host_type: HostType | None = None) -> ServiceResult:
        """Current icon and color for *host*; empty strings when unset."""
        entry = self._workspace.store.load().host(host)
        return ServiceResult(
            ok=True,
            op="get_host_settings",
            data={
                "command": "hostSettingsResponse",
                "host": host,
                "hostType": host_type.value if host_type else None,
                "currentIcon": entry.icon,
                "currentColor": entry.color,
            },
        )

    def set_host(
        self,
        host: str,
        *,
        icon: str | None = None,
        color: str | None = None,
        folders: list[str] | None = None,
    ) -> ServiceResult:
        """Update a host's icon, color, or folders, creating the entry if needed."""
        op = "update_host"
        if color and parse_rgb(color) is None:
            return _invalid_color(op, color)

        stored = self._workspace.store.load()
        entry = stored.hosts.setdefault(host, HostSettings())
        changed: list[str] = []
        if icon is not None:
            entry.icon = icon.strip()
            changed.append("icon")
        if color is not None:
            entry.color = color.strip()
            changed.append("color")
        if folders is not None:
            entry.folders = [f.strip() for f in folders if f.strip()]
            changed.append("folders")

        failure = self._save(op, stored)
        if failure is not None:
            return failure
        return ServiceResult(
            ok=True,
            op=op,
            data={"host": host, "fields_changed": changed, **entry.model_dump()},
        )

    def set_section(
        self,
        section: HostType,
        *,
        color: str | None = None,
        collapsed: bool | None = None,
    ) -> ServiceResult:
        """Change a section's accent color and/or collapsed state."""
        op = "update_section"
        if color and parse_rgb(color) is None:
            return _invalid_color(op, color)

        stored = self._workspace.store.load()
        if color is not None:
            setattr(stored.section_colors, section.value, color.strip())
        if collapsed is not None:
            setattr(stored.section_collapsed, section.value, collapsed)

        failure = self._save(op, stored)
        if failure is not None:
            return failure
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "section": section.value,
                "color": stored.section_color(section),
                "collapsed": stored.is_collapsed(section),
            },
        )

    def set_layout(self, layout: Layout) -> ServiceResult:
        op = "update_layout"
        stored = self._workspace.store.load()
        stored.layout = layout
        failure = self._save(op, stored)
        if failure is not None:
            return failure
        return ServiceResult(ok=True, op=op, data={"layout": layout.value})
