"""Subprocess helper for the external CLI tools (``wsl``, ``docker``, the editor).

Commands run without a shell, one at a time, and raise on failure so the
caller decides how to degrade. Callers catch
``(OSError, subprocess.SubprocessError)``: a missing binary is an OSError,
a non-zero exit or timeout is a SubprocessError.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Sequence
from typing import Any, Protocol

logger = logging.getLogger(__name__)

CommandFailure = (OSError, subprocess.SubprocessError)


class Runner(Protocol):
    """Callable that runs *args* and returns the completed process."""

    def __call__(
        self, args: Sequence[str], *, timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]: ...


def run_command(
    args: Sequence[str], *, timeout: float | None = None
) -> subprocess.CompletedProcess[bytes]:
    """Run *args* and capture raw stdout/stderr bytes. Raises on failure."""
    kwargs: dict[str, Any] = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW
    logger.debug("Running %s", " ".join(args))
    return subprocess.run(
        list(args),
        capture_output=True,
        timeout=timeout,
        check=True,
        **kwargs,
    )
