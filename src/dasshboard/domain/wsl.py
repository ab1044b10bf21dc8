"""Parsing for ``wsl --list --verbose`` and ``/etc/os-release``.

``wsl.exe`` writes UTF-16LE to a pipe, so the raw bytes are decoded here
rather than by the subprocess layer. Each data row looks like::

    * Ubuntu-22.04    Running         2
      Debian          Stopped         2

where ``*`` marks the default distribution and names may contain spaces.
"""

from __future__ import annotations

import codecs
import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

WSL_STATES = frozenset({"Stopped", "Running"})
DOCKER_DISTROS = frozenset({"docker-desktop", "docker-desktop-data"})
DEFAULT_DISTRO_TYPE = "Linux"

_ROW_RE = re.compile(r"^\s*\*?\s*(.+?)\s+(Stopped|Running)\s+(\d+)")
_COLUMN_SPLIT_RE = re.compile(r"\s{2,}|\t+")
_STATE_RE = re.compile(r"\b(Stopped|Running)\b")
_VERSION_RE = re.compile(r"\b(\d+)\b")

_PRETTY_NAME_RE = re.compile(r"^PRETTY_NAME=[\"']?([^\"'\n]+)[\"']?", re.IGNORECASE | re.MULTILINE)
_NAME_RE = re.compile(r"^NAME=[\"']?([^\"'\n]+)[\"']?", re.IGNORECASE | re.MULTILINE)
_ID_RE = re.compile(r"^ID=[\"']?([^\"'\n]+)[\"']?", re.IGNORECASE | re.MULTILINE)


@dataclass(frozen=True)
class WslDistro:
    """One row of ``wsl --list --verbose``."""

    name: str
    state: str
    version: int | None = None
    is_default: bool = False


def decode_wsl_output(raw: bytes) -> str:
    """Decode wsl.exe output, which is UTF-16LE unless WSL_UTF8 is set."""
    if raw.startswith(codecs.BOM_UTF16_LE):
        raw = raw[len(codecs.BOM_UTF16_LE) :]
    if b"\x00" in raw:
        text = raw.decode("utf-16-le", errors="replace")
    else:
        text = raw.decode("utf-8", errors="replace")
    return text.replace("\x00", "").lstrip("\ufeff")


def _parse_row(line: str) -> WslDistro | None:
    stripped = line.strip()
    is_default = stripped.startswith("*")

    match = _ROW_RE.match(line)
    if match:
        name, state, version = match.group(1).strip(), match.group(2), match.group(3)
    else:
        clean = stripped[1:].strip() if is_default else stripped
        parts = [p.strip() for p in _COLUMN_SPLIT_RE.split(clean) if p.strip()]
        if len(parts) >= 3:
            name, state, version = parts[0], parts[1], parts[2]
        elif len(parts) == 2:
            name = parts[0]
            state_match = _STATE_RE.search(clean)
            version_match = _VERSION_RE.search(parts[1])
            state = state_match.group(1) if state_match else ""
            version = version_match.group(1) if version_match else ""
        else:
            return None

    if not name or state not in WSL_STATES:
        return None
    return WslDistro(
        name=name,
        state=state,
        version=int(version) if version.isdigit() else None,
        is_default=is_default,
    )


def parse_wsl_list(text: str, *, skip: frozenset[str] = DOCKER_DISTROS) -> list[WslDistro]:
    """Parse ``wsl --list --verbose`` output into distributions.

    The header row and rows in an unknown state are dropped. Docker
    Desktop's internal distributions are skipped by default.
    """
    distros: list[WslDistro] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        distro = _parse_row(line)
        if distro is None:
            logger.debug("Skipping wsl list row: %r", line)
            continue
        if distro.name in skip:
            logger.debug("Skipping Docker-related WSL distro %s", distro.name)
            continue
        distros.append(distro)
    return distros


def parse_os_release(text: str) -> str:
    """Short distribution label from ``/etc/os-release`` contents.

    Examples:
        >>> parse_os_release('PRETTY_NAME="Ubuntu 22.04.3 LTS"\\nID=ubuntu\\n')
        'Ubuntu'
        >>> parse_os_release("ID=alpine\\n")
        'Alpine'
    """
    for pattern in (_PRETTY_NAME_RE, _NAME_RE):
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip().split()[0]
    match = _ID_RE.search(text)
    if match and match.group(1).strip():
        ident = match.group(1).strip().lower()
        return ident[:1].upper() + ident[1:]
    return DEFAULT_DISTRO_TYPE
