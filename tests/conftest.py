"""Shared pytest fixtures and test helpers for dasshboard tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Generator, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner

from dasshboard.config.settings import DasshSettings
from dasshboard.infrastructure.workspace import Workspace

TEST_EDITOR = "dassh-test-editor"


class FakeRunner:
    """Stand-in for :func:`run_command` keyed by argument prefix.

    Unmatched commands raise FileNotFoundError, like a missing binary.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self._responses: list[tuple[list[str], bytes, BaseException | None]] = []

    def add(
        self,
        prefix: Sequence[str],
        stdout: bytes = b"",
        *,
        error: BaseException | None = None,
    ) -> None:
        # Most recent registration wins.
        self._responses.insert(0, (list(prefix), stdout, error))

    def __call__(
        self, args: Sequence[str], *, timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        argv = list(args)
        self.calls.append(argv)
        for prefix, stdout, error in self._responses:
            if argv[: len(prefix)] == prefix:
                if error is not None:
                    raise error
                return subprocess.CompletedProcess(argv, 0, stdout=stdout, stderr=b"")
        raise FileNotFoundError(2, "No such file or directory", argv[0])

    def calls_to(self, program: str) -> list[list[str]]:
        return [c for c in self.calls if c and Path(c[0]).name == program]


def fake_resolver(hostname: str) -> str:
    table = {"example.com": "93.184.216.34", "db.internal": "10.0.0.12"}
    if hostname in table:
        return table[hostname]
    raise OSError(f"cannot resolve {hostname}")


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME (and so ~/.ssh and ~/.config) at a temp directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for var in ("XDG_CONFIG_HOME", "APPDATA", "DASSHBOARD_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("DASSHBOARD_DISCOVERY__SSH__RESOLVE_IPS", "false")
    monkeypatch.setenv("DASSHBOARD_EDITOR__COMMAND", TEST_EDITOR)
    monkeypatch.setenv("DASSHBOARD_SERVER__OPEN_BROWSER", "false")
    return home


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("dasshboard")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def home(_isolated_home: Path) -> Path:
    return _isolated_home


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A runner where ``docker ps`` succeeds with no containers."""
    runner = FakeRunner()
    runner.add(["docker", "ps"], b"")
    runner.add([TEST_EDITOR], b"")
    return runner


@pytest.fixture
def settings(_isolated_home: Path) -> DasshSettings:
    return DasshSettings.from_cli()


@pytest.fixture
def workspace(settings: DasshSettings, fake_runner: FakeRunner) -> Workspace:
    """Workspace on the temp home with fake subprocesses and DNS."""
    return Workspace(settings, runner=fake_runner, resolver=fake_resolver, platform="linux")


@pytest.fixture
def patched_runner(fake_runner: FakeRunner, monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """Route the CLI's real Workspace through *fake_runner*."""
    monkeypatch.setattr("dasshboard.infrastructure.workspace.run_command", fake_runner)
    return fake_runner


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

SAMPLE_SSH_CONFIG = """\
Host *
    ServerAliveInterval 60

Host web
    HostName example.com
    User deploy

Host db
    HostName db.internal
    User root

Host bastion
    HostName 192.168.1.10
"""

SAMPLE_DOCKER_PS = (
    b"3F4A9C0D1E2B|api|ghcr.io/acme/api:1.4|Up 2 hours\n"
    b"77aa00bb11cc|postgres|postgres:16|Up 5 minutes (healthy)\n"
)


def write_ssh_config(home: Path, text: str = SAMPLE_SSH_CONFIG) -> Path:
    """Write ``~/.ssh/config`` under the temp home."""
    path = home / ".ssh" / "config"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def wsl_listing(*rows: str) -> bytes:
    """``wsl --list --verbose`` output as wsl.exe writes it (UTF-16LE)."""
    lines = ["  NAME                   STATE           VERSION", *rows]
    return "\r\n".join(lines).encode("utf-16-le")
