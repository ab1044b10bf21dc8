"""BaseService — shared foundation for all dasshboard services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the settings store, host discovery, and the editor
launcher.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dasshboard.domain.hosts import DiscoveredHosts
from dasshboard.domain.preferences import DashboardSettings
from dasshboard.infrastructure.store import SettingsFileError
from dasshboard.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dasshboard.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ReconcileService(BaseService):
            def sync(self) -> ServiceResult:
                stored = self._workspace.store.load()
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def _discover(self, stored: DashboardSettings, warnings: list[str]) -> DiscoveredHosts:
        """Discover hosts with *stored* settings attached; failures become warnings."""
        return self._workspace.discovery.discover_all(stored.hosts, warnings)

    def _save(self, op: str, settings: DashboardSettings) -> ServiceResult | None:
        """Persist *settings*; return an error result if the write fails."""
        try:
            self._workspace.store.save(settings)
        except SettingsFileError as exc:
            logger.warning("Not saving settings: %s", exc)
            return self._write_failed(op, str(exc))
        except OSError as exc:
            logger.warning("Could not save settings: %s", exc)
            return self._write_failed(op, f"Could not write {self._workspace.store.path}: {exc}")
        return None

    def _write_failed(self, op: str, message: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="STORE_WRITE_FAILED",
                message=message,
                detail={"path": str(self._workspace.store.path)},
            ),
        )
