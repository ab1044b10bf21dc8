"""The persisted dashboard settings record and its merge rule.

The record is keyed by host name. Reconciliation only ever *adds*
entries for hosts seen for the first time; existing entries are the
user's and are never rewritten.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from dasshboard.domain.colors import check_color
from dasshboard.domain.hosts import Host, HostSettings, HostType, default_folder


class Layout(StrEnum):
    """Card arrangement on the dashboard."""

    GRID = "grid"
    LIST = "list"


class SectionColors(BaseModel):
    """Accent color per dashboard section ("" = theme default)."""

    ssh: str = ""
    wsl: str = ""
    docker: str = ""

    @field_validator("ssh", "wsl", "docker")
    @classmethod
    def _plain_color(cls, value: str) -> str:
        return check_color(value)


class SectionCollapsed(BaseModel):
    """Collapsed state per dashboard section."""

    ssh: bool = False
    wsl: bool = False
    docker: bool = False


class DashboardSettings(BaseModel):
    """Everything the dashboard remembers between runs."""

    model_config = {"extra": "ignore"}

    hosts: dict[str, HostSettings] = Field(default_factory=dict)
    layout: Layout = Layout.GRID
    section_colors: SectionColors = Field(default_factory=SectionColors)
    section_collapsed: SectionCollapsed = Field(default_factory=SectionCollapsed)

    def section_color(self, section: HostType) -> str:
        return getattr(self.section_colors, section.value)

    def is_collapsed(self, section: HostType) -> bool:
        return getattr(self.section_collapsed, section.value)

    def host(self, name: str) -> HostSettings:
        """Stored settings for *name*, or empty defaults (not inserted)."""
        return self.hosts.get(name) or HostSettings()


def merge_new_hosts(settings: DashboardSettings, hosts: Iterable[Host]) -> list[str]:
    """Add default entries for hosts missing from *settings*, in place.

    Docker containers are skipped. Returns the names that were added, so
    an empty list means the record is already up to date.
    """
    added: list[str] = []
    for host in hosts:
        if not host.persisted or host.name in settings.hosts:
            continue
        settings.hosts[host.name] = HostSettings(folders=[default_folder(host)])
        added.append(host.name)
    return added
