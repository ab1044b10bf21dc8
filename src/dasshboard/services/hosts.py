"""HostService — list discovered hosts and diagnose discovery."""

from __future__ import annotations

import platform
import shutil
import sys
from typing import Any

from dasshboard.domain.hosts import HostType
from dasshboard.domain.uris import detect_remote
from dasshboard.services.base import BaseService
from dasshboard.services.result import ServiceResult


class HostService(BaseService):
    """Read-only views over host discovery."""

    def list_hosts(self, host_type: HostType | None = None) -> ServiceResult:
        """All discovered hosts, or only those of *host_type*."""
        warnings: list[str] = []
        stored = self._workspace.store.load()
        hosts = self._discover(stored, warnings)
        selected = hosts.by_type(host_type) if host_type else hosts.all()
        items = [host.summary() for host in selected]
        return ServiceResult(
            ok=True,
            op="list_hosts",
            data={"items": items, "count": len(items), "counts": hosts.counts()},
            warnings=warnings,
        )

    def diagnose(self) -> ServiceResult:
        """Report the environment discovery depends on and what it found."""
        settings = self._workspace.settings
        discovery = self._workspace.discovery
        cfg = settings.discovery

        warnings: list[str] = []
        stored = self._workspace.store.load()
        hosts = self._discover(stored, warnings)
        remote = detect_remote(settings.editor.remote_name)

        tools: list[dict[str, Any]] = [
            {"tool": "ssh config", "path": str(cfg.ssh.config_path),
             "found": cfg.ssh.config_path.expanduser().is_file(), "enabled": cfg.ssh.enabled},
            {"tool": cfg.wsl.command, "path": shutil.which(cfg.wsl.command),
             "found": shutil.which(cfg.wsl.command) is not None,
             "enabled": cfg.wsl.enabled and discovery.wsl_available()},
            {"tool": cfg.docker.command, "path": shutil.which(cfg.docker.command),
             "found": shutil.which(cfg.docker.command) is not None, "enabled": cfg.docker.enabled},
            {"tool": settings.editor.command, "path": shutil.which(settings.editor.command),
             "found": shutil.which(settings.editor.command) is not None, "enabled": True},
        ]  # fmt: skip

        return ServiceResult(
            ok=True,
            op="diagnose",
            data={
                "platform": sys.platform,
                "system": platform.platform(),
                "is_windows": sys.platform == "win32",
                "remote": remote.remote_name or "local",
                "remote_type": remote.host_type.value if remote.host_type else None,
                "wsl_available": discovery.wsl_available(),
                "store": str(self._workspace.store.path),
                "config": str(settings.config_path) if settings.config_path else None,
                "tools": tools,
                "counts": hosts.counts(),
                "hosts": {t.value: [h.name for h in hosts.by_type(t)] for t in HostType},
            },
            warnings=warnings,
        )
