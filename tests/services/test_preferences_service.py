"""Tests for PreferencesService."""

from __future__ import annotations

import pytest

from dasshboard.domain.hosts import HostSettings, HostType
from dasshboard.domain.preferences import DashboardSettings, Layout
from dasshboard.infrastructure.workspace import Workspace
from dasshboard.services.preferences import PreferencesService


@pytest.fixture
def prefs(workspace: Workspace) -> PreferencesService:
    workspace.store.save(
        DashboardSettings(hosts={"web": HostSettings(folders=["/srv"], icon="lucide:db")})
    )
    return PreferencesService(workspace)


class TestShow:
    def test_all(self, prefs: PreferencesService) -> None:
        result = prefs.show()
        assert result.op == "show_settings"
        assert result.data["hosts"]["web"]["folders"] == ["/srv"]
        assert result.data["layout"] == "grid"
        assert result.data["store"].endswith("settings.json")

    def test_one_host(self, prefs: PreferencesService) -> None:
        result = prefs.show("web")
        assert result.op == "host_settings"
        assert result.data["icon"] == "lucide:db"

    def test_unknown_host(self, prefs: PreferencesService) -> None:
        result = prefs.show("nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "HOST_NOT_FOUND"


class TestGetHost:
    def test_existing(self, prefs: PreferencesService) -> None:
        result = prefs.get_host("web", HostType.SSH)
        assert result.data == {
            "command": "hostSettingsResponse",
            "host": "web",
            "hostType": "ssh",
            "currentIcon": "lucide:db",
            "currentColor": "",
        }

    def test_unknown_host_gives_empty_values(self, prefs: PreferencesService) -> None:
        result = prefs.get_host("ghost")
        assert result.ok
        assert result.data["currentIcon"] == ""
        assert result.data["hostType"] is None


class TestSetHost:
    def test_update_icon_and_color(self, prefs: PreferencesService, workspace: Workspace) -> None:
        result = prefs.set_host("web", icon="lucide:cloud", color="#ff8800")
        assert result.ok
        assert result.data["fields_changed"] == ["icon", "color"]
        stored = workspace.store.load().hosts["web"]
        assert stored.icon == "lucide:cloud"
        assert stored.color == "#ff8800"
        assert stored.folders == ["/srv"]

    def test_clear_color(self, prefs: PreferencesService, workspace: Workspace) -> None:
        prefs.set_host("web", color="#ff8800")
        prefs.set_host("web", color="")
        assert workspace.store.load().hosts["web"].color == ""

    def test_creates_entry(self, prefs: PreferencesService, workspace: Workspace) -> None:
        prefs.set_host("new", folders=["/a", " ", "/b "])
        assert workspace.store.load().hosts["new"].folders == ["/a", "/b"]

    def test_invalid_color(self, prefs: PreferencesService, workspace: Workspace) -> None:
        result = prefs.set_host("web", color="blurple")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COLOR"
        assert workspace.store.load().hosts["web"].color == ""


class TestSetSection:
    def test_color(self, prefs: PreferencesService, workspace: Workspace) -> None:
        result = prefs.set_section(HostType.WSL, color="#43aa8b")
        assert result.data == {"section": "wsl", "color": "#43aa8b", "collapsed": False}
        assert workspace.store.load().section_colors.wsl == "#43aa8b"

    def test_collapsed(self, prefs: PreferencesService, workspace: Workspace) -> None:
        prefs.set_section(HostType.DOCKER, collapsed=True)
        stored = workspace.store.load()
        assert stored.section_collapsed.docker is True
        assert stored.section_collapsed.ssh is False

    def test_invalid_color(self, prefs: PreferencesService) -> None:
        assert not prefs.set_section(HostType.SSH, color="#zz").ok


class TestSetLayout:
    def test_list(self, prefs: PreferencesService, workspace: Workspace) -> None:
        result = prefs.set_layout(Layout.LIST)
        assert result.data == {"layout": "list"}
        assert workspace.store.load().layout is Layout.LIST
        # Host entries survive a layout change.
        assert "web" in workspace.store.load().hosts

    def test_unreadable_file_not_replaced(self, workspace: Workspace) -> None:
        workspace.store.path.parent.mkdir(parents=True, exist_ok=True)
        workspace.store.path.write_text('{"layout": "grid",}', encoding="utf-8")
        result = PreferencesService(workspace).set_layout(Layout.LIST)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "STORE_WRITE_FAILED"
        assert workspace.store.path.read_text(encoding="utf-8") == '{"layout": "grid",}'
