"""Remote folder URIs understood by the editor's remote extensions.

- SSH:    ``vscode-remote://ssh-remote+<alias>/path``
- WSL:    ``vscode-remote://wsl+<distro>/path``
- Docker: ``vscode-remote://attached-container+<hex(json)>/path``
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from dasshboard.domain.hosts import HostType

REMOTE_SCHEME = "vscode-remote"


def _leading_slash(folder: str) -> str:
    folder = folder.strip()
    return folder if folder.startswith("/") else f"/{folder}"


def container_authority(container_name: str) -> str:
    """Authority for an attached container: hex-encoded ``{"containerName": ...}``."""
    payload = json.dumps({"containerName": container_name}, separators=(",", ":"))
    return f"attached-container+{payload.encode('utf-8').hex()}"


def normalize_container_path(folder: str | None) -> str:
    """Collapse doubled slashes; the root is always exactly ``/``.

    Examples:
        >>> normalize_container_path("")
        '/'
        >>> normalize_container_path("workspaces//app")
        '/workspaces/app'
    """
    path = (folder or "/").strip()
    if path in ("", "/"):
        return "/"
    path = _leading_slash(path)
    while "//" in path:
        path = path.replace("//", "/")
    return path


def remote_uri(host_type: HostType, host: str, folder: str) -> str:
    """Build the folder URI for *host* of *host_type*."""
    if host_type is HostType.DOCKER:
        return f"{REMOTE_SCHEME}://{container_authority(host)}{normalize_container_path(folder)}"
    path = _leading_slash(folder or "/")
    if host_type is HostType.WSL:
        return f"{REMOTE_SCHEME}://wsl+{host}{path}"
    return f"{REMOTE_SCHEME}://ssh-remote+{host}{path}"


@dataclass(frozen=True)
class RemoteContext:
    """The remote the dashboard is currently running inside, if any."""

    remote_name: str | None
    host_type: HostType | None

    @property
    def label(self) -> str:
        if self.host_type is HostType.SSH:
            return "SSH Connection"
        if self.host_type is HostType.WSL:
            return "WSL Connection"
        if self.host_type is HostType.DOCKER:
            return "Container Connection"
        return "Local"


def detect_remote(remote_name: str | None) -> RemoteContext:
    """Map an editor remote name (``ssh-remote``, ``wsl``, ...) to a host type."""
    host_type: HostType | None = None
    if remote_name == "ssh-remote":
        host_type = HostType.SSH
    elif remote_name == "wsl":
        host_type = HostType.WSL
    elif remote_name and remote_name.startswith(("attached-container", "dev-container")):
        host_type = HostType.DOCKER
    return RemoteContext(remote_name=remote_name or None, host_type=host_type)
