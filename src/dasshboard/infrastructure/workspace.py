"""Workspace — the bundle of adapters every service works against.

Holds the resolved settings plus the settings store, host discovery, and
editor launcher built from them. Tests inject a fake runner and resolver
here so no real process or DNS lookup ever happens.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dasshboard.infrastructure.discovery import HostDiscovery
from dasshboard.infrastructure.editor import EditorLauncher
from dasshboard.infrastructure.runner import Runner, run_command
from dasshboard.infrastructure.store import SettingsStore

if TYPE_CHECKING:
    from dasshboard.config.settings import DasshSettings


class Workspace:
    """Adapters shared by all services for one CLI invocation or server."""

    def __init__(
        self,
        settings: DasshSettings,
        *,
        runner: Runner | None = None,
        resolver: Callable[[str], str] | None = None,
        platform: str | None = None,
    ) -> None:
        self.settings = settings
        run = runner or run_command
        self.store = SettingsStore(settings.store.path)
        self.discovery = HostDiscovery(
            settings.discovery,
            runner=run,
            resolver=resolver,
            platform=platform,
        )
        self.editor = EditorLauncher(settings.editor, runner=run)
