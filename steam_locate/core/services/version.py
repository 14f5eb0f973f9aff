"""
Version detection — best-effort Steam client version.

On Windows the launcher's file-version resource is asked first. Every
platform then falls back to the plain-text version markers Steam leaves
under its root. Nothing here raises; no answer is None.
"""

from __future__ import annotations

import logging
from pathlib import Path

from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.context import get_settings
from steam_locate.core.models.settings import Settings
from steam_locate.core.services.platform import current_platform

logger = logging.getLogger(__name__)

# Marker files, relative to the Steam root, in lookup order
VERSION_FILES: tuple[tuple[str, ...], ...] = (
    ("package", "steam_client_win32"),
    ("steam_client_win32",),
    ("version.txt",),
    ("package", "version.txt"),
)


def _file_version(steam_path: str, runner: CommandRunner) -> str | None:
    """FileVersion of steam.exe via PowerShell."""
    exe = Path(steam_path) / "steam.exe"
    if not exe.exists():
        return None

    quoted = str(exe).replace("'", "''")
    receipt = runner.run([
        "powershell", "-NoProfile", "-Command",
        f"(Get-Item '{quoted}').VersionInfo.FileVersion",
    ])
    if receipt.ok and receipt.output:
        return receipt.output
    return None


def _marker_file_version(steam_path: str) -> str | None:
    for parts in VERSION_FILES:
        path = Path(steam_path).joinpath(*parts)
        if not path.is_file():
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace").strip()
        except OSError as e:
            logger.debug("Cannot read version marker %s: %s", path, e)
            continue
        if content:
            return content
    return None


def get_steam_version(
    steam_path: str,
    platform: str | None = None,
    *,
    settings: Settings | None = None,
    runner: CommandRunner | None = None,
) -> str | None:
    """Steam client version string, or None if it cannot be determined."""
    platform = platform or current_platform()
    try:
        if platform == "win32":
            settings = settings or get_settings()
            runner = runner or CommandRunner(timeout=settings.command_timeout)
            version = _file_version(steam_path, runner)
            if version:
                return version
        return _marker_file_version(steam_path)
    except Exception as e:
        logger.debug("Version detection failed for %s: %s", steam_path, e)
        return None
