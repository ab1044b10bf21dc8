"""JSON-backed settings store.

Loading never raises: a missing or unreadable file yields defaults so the
dashboard always renders. Saving writes a sibling temp file and renames it
over the target, and refuses to replace a file that exists but does not
parse, so a hand-editing mistake never costs the user their settings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from dasshboard.domain.preferences import DashboardSettings

logger = logging.getLogger(__name__)


class SettingsFileError(OSError):
    """The settings file exists but cannot be read as dashboard settings."""


class SettingsStore:
    """Reads and writes :class:`DashboardSettings` at a fixed path."""

    def __init__(self, path: Path) -> None:
        self._path = path.expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DashboardSettings:
        return self.load_checked()[0]

    def load_checked(self) -> tuple[DashboardSettings, str | None]:
        """Settings plus a description of why the file was unusable, if it was.

        The problem is ``None`` for a readable, empty, or missing file.
        """
        try:
            return self._read(), None
        except (OSError, ValidationError) as exc:
            logger.warning("Could not read settings from %s: %s", self._path, exc)
            return DashboardSettings(), self._describe(exc)

    def save(self, settings: DashboardSettings) -> None:
        """Persist *settings*.

        Raises:
            SettingsFileError: the existing file is unreadable and was left alone.
            OSError: the file could not be written.
        """
        try:
            self._read()
        except (OSError, ValidationError) as exc:
            raise SettingsFileError(self._describe(exc)) from exc

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(f"{self._path.name}.tmp")
        tmp.write_text(settings.model_dump_json(indent=2) + "\n", encoding="utf-8")
        tmp.replace(self._path)
        logger.debug("Saved settings to %s", self._path)

    def _read(self) -> DashboardSettings:
        if not self._path.is_file():
            return DashboardSettings()
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return DashboardSettings()
        return DashboardSettings.model_validate_json(raw)

    def _describe(self, exc: OSError | ValidationError) -> str:
        if isinstance(exc, ValidationError):
            first = exc.errors()[0]
            where = ".".join(str(part) for part in first["loc"]) or "file"
            reason = f"{where}: {first['msg']}"
        else:
            reason = exc.strerror or str(exc)
        return f"Settings file {self._path} is unreadable ({reason}); it will not be modified"
