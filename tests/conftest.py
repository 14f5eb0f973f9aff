"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.context import reset_settings
from steam_locate.core.models.receipt import Receipt


class FakeRunner(CommandRunner):
    """CommandRunner that answers from a table instead of spawning.

    Keys are the full command line (args joined by spaces). Unknown
    commands fail the way a missing binary would.
    """

    def __init__(self, responses: dict[str, Receipt] | None = None):
        super().__init__(timeout=1.0)
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []

    def add(self, command: str, output: str = "", ok: bool = True) -> None:
        source = command.split()[0]
        if ok:
            self.responses[command] = Receipt.success(source=source, output=output)
        else:
            self.responses[command] = Receipt.failure(source=source, error=output or "failed")

    def run(self, args: list[str], timeout: float | None = None) -> Receipt:
        self.calls.append(list(args))
        command = " ".join(args)
        if command in self.responses:
            return self.responses[command]
        return Receipt.failure(source=args[0], error=f"[fake] command not found: {command}")


def _write_acf(path: Path, **fields: str) -> Path:
    """Write an appmanifest-style file with the given top-level fields."""
    lines = ['"AppState"', "{"]
    lines += [f'\t"{key}"\t\t"{value}"' for key, value in fields.items()]
    lines.append("}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def _write_library_folders(steam_root: Path, paths: list[str]) -> Path:
    """Write steamapps/libraryfolders.vdf declaring the given library paths."""
    lines = ['"libraryfolders"', "{"]
    for index, raw in enumerate(paths):
        escaped = raw.replace("\\", "\\\\")
        lines += [
            f'\t"{index}"',
            "\t{",
            f'\t\t"path"\t\t"{escaped}"',
            '\t\t"label"\t\t""',
            '\t\t"apps"',
            "\t\t{",
            "\t\t}",
            "\t}",
        ]
    lines.append("}")
    vdf = steam_root / "steamapps" / "libraryfolders.vdf"
    vdf.parent.mkdir(parents=True, exist_ok=True)
    vdf.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return vdf


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    """Fresh settings, untouched root logger, no STEAMLOCATE_* variables."""
    for var in (
        "STEAMLOCATE_CONFIG",
        "STEAMLOCATE_COMMAND_TIMEOUT",
        "STEAMLOCATE_LOG_LEVEL",
        "STEAMLOCATE_LOG_FILE",
        "STEAMLOCATE_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_settings()


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def steam_root(tmp_path: Path) -> Path:
    """A Steam root with an empty steamapps folder."""
    root = tmp_path / "Steam"
    (root / "steamapps").mkdir(parents=True)
    return root


@pytest.fixture
def tf2_root(steam_root: Path) -> Path:
    """A Steam root with Team Fortress 2 installed in the main library."""
    steamapps = steam_root / "steamapps"
    _write_acf(
        steamapps / "appmanifest_440.acf",
        appid="440",
        name="Team Fortress 2",
        installdir="Team Fortress 2",
        SizeOnDisk="15000000000",
        LastUpdated="1640995200",
    )
    (steamapps / "common" / "Team Fortress 2").mkdir(parents=True)
    return steam_root


@pytest.fixture
def write_acf():
    """Helper: write_acf(path, **fields) -> path."""
    return _write_acf


@pytest.fixture
def write_library_folders():
    """Helper: write_library_folders(steam_root, paths) -> vdf path."""
    return _write_library_folders
