"""LaunchService — open remote folders and local files in the editor."""

from __future__ import annotations

import logging

from dasshboard.domain.hosts import Host, HostType, default_folder
from dasshboard.domain.uris import remote_uri
from dasshboard.infrastructure.runner import CommandFailure
from dasshboard.services.base import BaseService
from dasshboard.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class LaunchService(BaseService):
    """Delegates every connection to the editor's remote extensions."""

    def _launch_failed(self, op: str, exc: Exception, **detail: str) -> ServiceResult:
        logger.warning("Editor launch failed: %s", exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="EDITOR_LAUNCH_FAILED",
                message=f"Could not launch {self._workspace.settings.editor.command}: {exc}",
                detail=detail,
            ),
        )

    def open_folder(
        self,
        host: str,
        folder: str | None = None,
        *,
        host_type: HostType = HostType.SSH,
        new_window: bool = False,
    ) -> ServiceResult:
        """Open *folder* on *host*; the folder defaults to the first stored one."""
        op = "open_folder"
        if not folder:
            stored = self._workspace.store.load().host(host)
            if host_type is HostType.DOCKER:
                folder = "/"
            elif stored.folders:
                folder = stored.folders[0]
            else:
                folder = default_folder(Host(name=host, hostname=host, type=host_type))

        uri = remote_uri(host_type, host, folder)
        try:
            command = self._workspace.editor.open_folder(uri, new_window=new_window)
        except CommandFailure as exc:
            return self._launch_failed(op, exc, uri=uri)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "host": host,
                "type": host_type.value,
                "folder": folder,
                "uri": uri,
                "new_window": new_window,
                "command": command,
            },
        )

    def open_ssh_config(self) -> ServiceResult:
        op = "open_ssh_config"
        path = self._workspace.settings.discovery.ssh.config_path.expanduser()
        try:
            self._workspace.editor.open_file(path)
        except CommandFailure as exc:
            return self._launch_failed(op, exc, path=str(path))
        return ServiceResult(ok=True, op=op, data={"path": str(path)})

    def open_settings(self) -> ServiceResult:
        op = "open_settings"
        path = self._workspace.store.path
        if not path.is_file():
            failure = self._save(op, self._workspace.store.load())
            if failure is not None:
                return failure
        try:
            self._workspace.editor.open_file(path)
        except CommandFailure as exc:
            return self._launch_failed(op, exc, path=str(path))
        return ServiceResult(ok=True, op=op, data={"path": str(path)})
