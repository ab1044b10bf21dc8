"""Tests for the root dasshboard CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dasshboard import __version__
from dasshboard.cli import cli
from tests.conftest import write_ssh_config


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "dasshboard" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output
    for name in ("hosts", "sync", "render", "serve", "open", "diagnose", "settings"):
        assert name in result.output


# --- Global flags ---


@pytest.mark.usefixtures("patched_runner")
class TestGlobalFlags:
    def test_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        toml = tmp_path / "alt.toml"
        toml.write_text(f'[store]\npath = "{(tmp_path / "alt.json").as_posix()}"\n')
        result = cli_runner.invoke(cli, ["--json", "-c", str(toml), "settings", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["store"] == str(tmp_path / "alt.json")

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        toml = tmp_path / "bad.toml"
        toml.write_text("[store\n")
        result = cli_runner.invoke(cli, ["-c", str(toml), "hosts"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_log_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--log-json", "-v", "hosts"])
        assert result.exit_code == 0


# --- End to end ---


@pytest.mark.usefixtures("patched_runner")
class TestWorkflow:
    def test_sync_customize_render(self, cli_runner: CliRunner, home: Path) -> None:
        write_ssh_config(home)
        assert cli_runner.invoke(cli, ["sync"]).exit_code == 0
        assert cli_runner.invoke(
            cli, ["settings", "host", "web", "--folder", "/srv/site", "--color", "#06d6a0"]
        ).exit_code == 0
        assert cli_runner.invoke(cli, ["settings", "section", "ssh", "--color", "#118ab2"]).exit_code == 0

        result = cli_runner.invoke(cli, ["render"])
        assert result.exit_code == 0
        html = result.stdout
        assert "/srv/site" in html
        assert "#06d6a0" in html
        assert "--section-color: #118ab2" in html

        # A second sync never overwrites the customised entry.
        cli_runner.invoke(cli, ["sync"])
        shown = cli_runner.invoke(cli, ["--json", "settings", "show", "web"])
        assert json.loads(shown.stdout)["data"]["folders"] == ["/srv/site"]
