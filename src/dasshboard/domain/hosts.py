"""Host records and the per-type presentation rules applied to them.

A host is any remote target the editor can open a folder on: an SSH alias,
a WSL distribution, or a running Docker container. Hosts are keyed by
``name``; the name is also the key into the persisted settings store.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from dasshboard.domain.colors import check_color


class HostType(StrEnum):
    """Kinds of remote target, in dashboard section order."""

    SSH = "ssh"
    WSL = "wsl"
    DOCKER = "docker"


class HostSettings(BaseModel):
    """Persisted display settings for one host.

    Empty ``color``/``icon`` mean "use the theme default".
    """

    model_config = {"extra": "ignore"}

    folders: list[str] = Field(default_factory=list)
    color: str = ""
    icon: str = ""

    @field_validator("color")
    @classmethod
    def _plain_color(cls, value: str) -> str:
        return check_color(value)


class Host(BaseModel):
    """A discovered remote target."""

    name: str
    hostname: str
    type: HostType
    user: str | None = None
    ip: str | None = None
    settings: HostSettings = Field(default_factory=HostSettings)
    container_id: str | None = None
    container_status: str | None = None
    image: str | None = None
    distro_type: str | None = None

    @property
    def persisted(self) -> bool:
        """Docker containers are ephemeral and never written to the store."""
        return self.type is not HostType.DOCKER

    def summary(self) -> dict[str, Any]:
        """Flat dict used in service results and JSON output."""
        return {
            "name": self.name,
            "type": str(self.type),
            "hostname": self.hostname,
            "user": self.user,
            "ip": self.ip,
            "detail": connection_detail(self),
            "folders": display_folders(self),
            "color": self.settings.color,
            "icon": self.settings.icon,
            "container_id": self.container_id,
            "status": self.container_status,
        }


class DiscoveredHosts(BaseModel):
    """Hosts found in one discovery pass, grouped by type."""

    ssh: list[Host] = Field(default_factory=list)
    wsl: list[Host] = Field(default_factory=list)
    docker: list[Host] = Field(default_factory=list)

    def by_type(self, host_type: HostType) -> list[Host]:
        return getattr(self, host_type.value)

    def all(self) -> list[Host]:
        return [*self.ssh, *self.wsl, *self.docker]

    def persisted(self) -> list[Host]:
        """Hosts whose settings live in the store (SSH and WSL)."""
        return [*self.ssh, *self.wsl]

    def counts(self) -> dict[str, int]:
        return {t.value: len(self.by_type(t)) for t in HostType}


def default_folder(host: Host) -> str:
    """Folder seeded into the store the first time a host is seen."""
    if host.type is HostType.SSH:
        return f"/home/{host.user}" if host.user else "/home"
    if host.type is HostType.DOCKER:
        return "/workspaces"
    return "/home"


def display_folders(host: Host) -> list[str]:
    """Folders shown on the host card.

    Docker containers always show the filesystem root; other hosts show
    their configured folders, falling back to the user's home directory.
    """
    if host.type is HostType.DOCKER:
        return ["/"]
    if host.settings.folders:
        return list(host.settings.folders)
    if host.user == "root":
        return ["/root"]
    if host.user:
        return [f"/home/{host.user}"]
    return ["/home"]


def connection_detail(host: Host) -> str:
    """Second line of a host card: ``user@hostname``, distro, or image."""
    if host.type is HostType.SSH:
        return f"{host.user}@{host.hostname}" if host.user else host.hostname
    if host.type is HostType.WSL:
        return host.distro_type or "WSL Distro"
    return host.image or "Docker Container"
