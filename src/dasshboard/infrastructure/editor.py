"""Editor launcher — hands remote URIs and local files to the editor's CLI.

The remote connection itself is entirely the editor's job; this module
only builds the command line.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from dasshboard.config.models import EditorConfig
from dasshboard.infrastructure.runner import Runner, run_command

logger = logging.getLogger(__name__)


class EditorLauncher:
    """Runs ``<editor> --folder-uri ...`` and friends."""

    def __init__(self, config: EditorConfig, *, runner: Runner | None = None) -> None:
        self._config = config
        self._run = runner or run_command

    @property
    def executable(self) -> str:
        """Resolved editor binary (``code.cmd`` on Windows resolves via PATH)."""
        return shutil.which(self._config.command) or self._config.command

    def open_folder(self, uri: str, *, new_window: bool = False) -> list[str]:
        """Open a remote folder URI. Returns the command that was run."""
        window_flag = "--new-window" if new_window else "--reuse-window"
        args = [self.executable, window_flag, "--folder-uri", uri]
        logger.info("Opening %s", uri)
        self._run(args, timeout=self._config.timeout)
        return args

    def open_file(self, path: Path) -> list[str]:
        """Open a local file (ssh config, settings store) for editing."""
        args = [self.executable, "--reuse-window", str(path)]
        self._run(args, timeout=self._config.timeout)
        return args
