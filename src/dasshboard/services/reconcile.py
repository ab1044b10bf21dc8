"""ReconcileService — seed the settings store with newly discovered hosts.

Pipeline: LOAD → DISCOVER → MERGE → SAVE (only when something was added).

Running it twice in a row is a no-op the second time. Existing entries
are never modified or removed, and Docker containers are never stored.
"""

from __future__ import annotations

import logging

from dasshboard.domain.hosts import DiscoveredHosts
from dasshboard.domain.preferences import DashboardSettings, merge_new_hosts
from dasshboard.services.base import BaseService
from dasshboard.services.result import ServiceResult

logger = logging.getLogger(__name__)


class ReconcileService(BaseService):
    """Keeps the settings store in step with the hosts on this machine."""

    def sync(self) -> ServiceResult:
        """Add default settings for every SSH/WSL host not yet in the store."""
        warnings: list[str] = []
        stored, hosts, added = self.reconcile(warnings)
        return ServiceResult(
            ok=True,
            op="sync",
            data={
                "added": added,
                "added_count": len(added),
                "total": len(stored.hosts),
                "counts": hosts.counts(),
                "store": str(self._workspace.store.path),
            },
            warnings=warnings,
        )

    def reconcile(
        self, warnings: list[str]
    ) -> tuple[DashboardSettings, DiscoveredHosts, list[str]]:
        """Run one reconciliation pass; shared with the dashboard renderer.

        Returns the (possibly updated) settings, the discovered hosts with
        settings attached, and the names that were added. A failed save is
        reported through *warnings*; the in-memory settings stay usable.
        An unreadable settings file is reported the same way and never
        written over.
        """
        stored, problem = self._workspace.store.load_checked()
        if problem is not None:
            warnings.append(problem)
        hosts = self._discover(stored, warnings)
        added = merge_new_hosts(stored, hosts.persisted())

        if not added:
            logger.debug("No new hosts detected; settings are up to date")
            return stored, hosts, added

        if problem is not None:
            logger.info("Not saving %d new host(s): settings file is unreadable", len(added))
        else:
            failure = self._save("sync", stored)
            if failure is not None and failure.error is not None:
                warnings.append(failure.error.message)
            else:
                logger.info("Added %d new host(s) to settings: %s", len(added), ", ".join(added))
        for host in hosts.persisted():
            if host.name in added:
                host.settings = stored.hosts[host.name].model_copy(deep=True)
        return stored, hosts, added
