"""Tests for the FastAPI dashboard app."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from dasshboard.config.settings import DasshSettings
from dasshboard.infrastructure.workspace import Workspace
from dasshboard.web.app import build_app
from tests.conftest import TEST_EDITOR, FakeRunner, write_ssh_config


@pytest.fixture
def client(settings: DasshSettings, workspace: Workspace) -> TestClient:
    return TestClient(build_app(settings, workspace=workspace))


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["store"].endswith("settings.json")


class TestDashboardPage:
    def test_renders(self, client: TestClient, home: Path) -> None:
        write_ssh_config(home)
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "deploy@example.com" in resp.text

    def test_renders_without_hosts(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert "No SSH hosts" in resp.text


class TestMessages:
    def test_open_folder(self, client: TestClient, fake_runner: FakeRunner) -> None:
        resp = client.post(
            "/messages", json={"command": "openFolder", "host": "web", "folder": "/srv"}
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["ok"] is True
        assert body["data"]["uri"] == "vscode-remote://ssh-remote+web/srv"
        assert fake_runner.calls_to(TEST_EDITOR)

    def test_update_section_color(self, client: TestClient, workspace: Workspace) -> None:
        resp = client.post(
            "/messages", json={"command": "updateSectionColor", "section": "ssh", "color": "#fff"}
        )
        assert resp.json()["data"]["reload"] is True
        assert workspace.store.load().section_colors.ssh == "#fff"

    def test_invalid_message(self, client: TestClient) -> None:
        resp = client.post("/messages", json={"command": "selfDestruct"})
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "INVALID_MESSAGE"

    def test_launch_failure_is_200(self, client: TestClient, fake_runner: FakeRunner) -> None:
        fake_runner.add([TEST_EDITOR], error=FileNotFoundError(TEST_EDITOR))
        resp = client.post("/messages", json={"command": "openSshConfig"})
        assert resp.status_code == 200
        assert resp.json()["ok"] is False


class TestIcons:
    def test_serves_user_icons(self, settings: DasshSettings, workspace: Workspace) -> None:
        icon_dir = settings.dashboard.icon_dir
        icon_dir.mkdir(parents=True)
        (icon_dir / "rack.svg").write_text("<svg xmlns='http://www.w3.org/2000/svg'/>")
        client = TestClient(build_app(settings, workspace=workspace))
        resp = client.get("/icons/rack.svg")
        assert resp.status_code == 200
        assert "<svg" in resp.text
