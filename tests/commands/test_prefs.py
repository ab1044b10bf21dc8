"""Tests for the settings command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dasshboard.cli import cli


def _stored(home: Path) -> dict:
    return json.loads((home / ".config" / "dasshboard" / "settings.json").read_text())


@pytest.mark.usefixtures("patched_runner")
class TestSettingsCommands:
    def test_show_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "settings", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["hosts"] == {}

    def test_host(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(
            cli,
            ["settings", "host", "web", "--icon", "lucide:db", "--color", "#e06c75",
             "--folder", "/srv", "--folder", "/var/log"],
        )  # fmt: skip
        assert result.exit_code == 0
        assert _stored(home)["hosts"]["web"] == {
            "folders": ["/srv", "/var/log"],
            "color": "#e06c75",
            "icon": "lucide:db",
        }

    def test_show_host(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["settings", "host", "web", "--icon", "lucide:db"])
        result = cli_runner.invoke(cli, ["--json", "settings", "show", "web"])
        assert json.loads(result.stdout)["data"]["icon"] == "lucide:db"

    def test_show_unknown_host(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["settings", "show", "ghost"])
        assert result.exit_code == 1

    def test_bad_color(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["settings", "host", "web", "--color", "blurple"])
        assert result.exit_code == 1
        assert "blurple" in result.stderr

    def test_section(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["settings", "section", "docker", "--collapse"])
        assert result.exit_code == 0
        assert _stored(home)["section_collapsed"]["docker"] is True
        cli_runner.invoke(cli, ["settings", "section", "docker", "--expand", "--color", "#abc"])
        stored = _stored(home)
        assert stored["section_collapsed"]["docker"] is False
        assert stored["section_colors"]["docker"] == "#abc"

    def test_section_requires_change(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["settings", "section", "ssh"])
        assert result.exit_code == 2

    def test_layout(self, cli_runner: CliRunner, home: Path) -> None:
        result = cli_runner.invoke(cli, ["settings", "layout", "list"])
        assert result.exit_code == 0
        assert _stored(home)["layout"] == "list"
