"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dasshboard.toml only contains
overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from dasshboard.config.discovery import default_config_dir


def _default_ssh_config() -> Path:
    return Path.home() / ".ssh" / "config"


def _default_store_path() -> Path:
    return default_config_dir() / "settings.json"


def _default_icon_dir() -> Path:
    return default_config_dir() / "icons"


class SshDiscoveryConfig(BaseModel):
    """[discovery.ssh] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    config_path: Path = Field(default_factory=_default_ssh_config)
    resolve_ips: bool = True


class WslDiscoveryConfig(BaseModel):
    """[discovery.wsl] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    force: bool = False
    command: str = "wsl"
    timeout: float = 10.0
    probe_timeout: float = 5.0
    skip_distros: list[str] = Field(
        default_factory=lambda: ["docker-desktop", "docker-desktop-data"]
    )


class DockerDiscoveryConfig(BaseModel):
    """[discovery.docker] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    command: str = "docker"
    timeout: float = 5.0


class DiscoveryConfig(BaseModel):
    """[discovery] section."""

    model_config = {"frozen": True}

    ssh: SshDiscoveryConfig = Field(default_factory=SshDiscoveryConfig)
    wsl: WslDiscoveryConfig = Field(default_factory=WslDiscoveryConfig)
    docker: DockerDiscoveryConfig = Field(default_factory=DockerDiscoveryConfig)


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    path: Path = Field(default_factory=_default_store_path)


class EditorConfig(BaseModel):
    """[editor] section."""

    model_config = {"frozen": True}

    command: str = "code"
    timeout: float = 30.0
    remote_name: str | None = None


class DashboardConfig(BaseModel):
    """[dashboard] section."""

    model_config = {"frozen": True}

    title: str = "DaSSHboard"
    icon_dir: Path = Field(default_factory=_default_icon_dir)


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8765
    open_browser: bool = True
