"""
Tests for CLI commands — locate, running, libraries, app, apps, config show.
"""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

import steam_locate.core.services.process as process
import steam_locate.core.use_cases.locate as locate
from steam_locate.core.context import get_settings
from steam_locate.core.errors import SteamNotFoundError
from steam_locate.core.models.steam import SteamApp, SteamLocation
from steam_locate.main import cli


@pytest.fixture(autouse=True)
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from an empty directory with an empty home."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def found(monkeypatch: pytest.MonkeyPatch) -> SteamLocation:
    location = SteamLocation(
        path="/home/u/.local/share/Steam",
        platform="linux",
        is_running=True,
        version="1700000000",
        library_folders=["/home/u/.local/share/Steam/steamapps", "/mnt/games/steamapps"],
    )
    monkeypatch.setattr(locate, "find_steam_location", lambda **kw: location)
    return location


@pytest.fixture
def missing(monkeypatch: pytest.MonkeyPatch) -> None:
    def _raise(**kw):
        raise SteamNotFoundError("Could not locate Steam installation on Linux", "linux")

    monkeypatch.setattr(locate, "find_steam_location", _raise)
    monkeypatch.setattr(locate, "find_steam_path", lambda platform=None, **kw: _raise())


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "steam-locate" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_config_option_applies_settings(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "custom.yml"
        config.write_text("command_timeout: 1.5\n")
        seen = {}

        def fake_running(**kw):
            seen["timeout"] = get_settings().command_timeout
            return False

        monkeypatch.setattr(process, "is_steam_running", fake_running)
        result = CliRunner().invoke(cli, ["--config", str(config), "running"])
        assert result.exit_code == 0
        assert seen["timeout"] == 1.5

    def test_broken_config_fails(self, workdir: Path):
        (workdir / "steamlocate.yml").write_text("command_timeout: [oops\n")
        result = CliRunner().invoke(cli, ["running"])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestLocateCommand:
    def test_human_output(self, found: SteamLocation):
        result = CliRunner().invoke(cli, ["locate"])
        assert result.exit_code == 0
        assert found.path in result.output
        assert "Linux" in result.output
        assert "/mnt/games/steamapps" in result.output

    def test_quiet_prints_path_only(self, found: SteamLocation):
        result = CliRunner().invoke(cli, ["--quiet", "locate"])
        assert result.exit_code == 0
        assert result.output.strip() == found.path

    def test_json(self, found: SteamLocation):
        result = CliRunner().invoke(cli, ["locate", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["path"] == found.path
        assert data["platform"] == "linux"
        assert data["is_running"] is True

    def test_not_found(self, missing):
        result = CliRunner().invoke(cli, ["locate"])
        assert result.exit_code == 1
        assert "Could not locate" in result.output

    def test_not_found_json(self, missing):
        result = CliRunner().invoke(cli, ["locate", "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["platform"] == "linux"
        assert "error" in data


class TestRunningCommand:
    def test_running(self, monkeypatch):
        monkeypatch.setattr(process, "is_steam_running", lambda **kw: True)
        result = CliRunner().invoke(cli, ["running"])
        assert result.exit_code == 0
        assert "is running" in result.output

    def test_not_running_json(self, monkeypatch):
        monkeypatch.setattr(process, "is_steam_running", lambda **kw: False)
        result = CliRunner().invoke(cli, ["running", "--json"])
        assert json.loads(result.output) == {"running": False}


class TestLibrariesCommand:
    def test_explicit_root(self, steam_root: Path):
        result = CliRunner().invoke(cli, ["libraries", "--steam-path", str(steam_root), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"library_folders": [str(steam_root / "steamapps")]}

    def test_plain_list(self, steam_root: Path):
        result = CliRunner().invoke(cli, ["libraries", "--steam-path", str(steam_root)])
        assert result.exit_code == 0
        assert str(steam_root / "steamapps") in result.output

    def test_nothing_found(self, tmp_path: Path):
        result = CliRunner().invoke(cli, ["libraries", "--steam-path", str(tmp_path)])
        assert result.exit_code == 0
        assert "No library folders" in result.output

    def test_root_not_found(self, missing):
        result = CliRunner().invoke(cli, ["libraries"])
        assert result.exit_code == 1


class TestAppCommand:
    def test_found(self, tf2_root: Path):
        result = CliRunner().invoke(cli, ["app", "440", "--steam-path", str(tf2_root)])
        assert result.exit_code == 0
        assert "Team Fortress 2" in result.output
        assert "14.0 GB" in result.output

    def test_found_json(self, tf2_root: Path):
        result = CliRunner().invoke(cli, ["app", "440", "--steam-path", str(tf2_root), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["app_id"] == "440"
        assert data["size_on_disk"] == 15000000000
        assert data["is_installed"] is True

    def test_missing_app_json(self, tf2_root: Path):
        result = CliRunner().invoke(cli, ["app", "999", "--steam-path", str(tf2_root), "--json"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["app_id"] == "999"
        assert data["error"] == "Steam app with ID 999 not found"

    def test_root_not_found(self, missing):
        result = CliRunner().invoke(cli, ["app", "440"])
        assert result.exit_code == 1
        assert "Could not locate" in result.output


class TestAppsCommand:
    def test_json(self, tf2_root: Path):
        result = CliRunner().invoke(cli, ["apps", "--steam-path", str(tf2_root), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 1
        assert data["apps"][0]["name"] == "Team Fortress 2"

    def test_human_output(self, monkeypatch):
        installed = [
            SteamApp(
                app_id="620",
                name="Portal 2",
                install_dir="/lib/steamapps/common/Portal 2",
                size_on_disk=512,
                is_installed=True,
                last_updated=datetime(2023, 5, 1, tzinfo=UTC),
            ),
        ]
        monkeypatch.setattr(locate, "get_installed_steam_apps", lambda steam_path=None, **kw: installed)
        result = CliRunner().invoke(cli, ["apps"])
        assert result.exit_code == 0
        assert "[620] Portal 2" in result.output
        assert "512 B" in result.output

    def test_root_not_found_json(self, missing):
        result = CliRunner().invoke(cli, ["apps", "--json"])
        assert result.exit_code == 1
        assert "error" in json.loads(result.output)


class TestConfigShowCommand:
    def test_defaults(self):
        result = CliRunner().invoke(cli, ["config", "show", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["config_path"] is None
        assert data["settings"]["extra_search_paths"] == []

    def test_local_file(self, workdir: Path):
        (workdir / "steamlocate.yml").write_text("extra_search_paths: [/opt/steam]\n")
        result = CliRunner().invoke(cli, ["config", "show"])
        assert result.exit_code == 0
        assert "/opt/steam" in result.output

    def test_broken_file_reported(self, workdir: Path):
        (workdir / "steamlocate.yml").write_text("- not a mapping\n")
        result = CliRunner().invoke(cli, ["config", "show", "--json"])
        assert result.exit_code == 1
        assert "mapping" in json.loads(result.output)["error"]
