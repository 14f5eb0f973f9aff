"""
Windows strategies — registry lookup, then conventional install paths.

A candidate only counts when the directory exists AND holds the
launcher (steam.exe); a stale registry value pointing at an emptied
folder must not win over a real install elsewhere.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.models.receipt import Receipt

logger = logging.getLogger(__name__)

STEAM_EXE = "steam.exe"

# (key, value) pairs, user scope first, then machine scope (native, then 32-bit view)
REGISTRY_QUERIES: tuple[tuple[str, str], ...] = (
    (r"HKCU\Software\Valve\Steam", "SteamPath"),
    (r"HKLM\Software\Valve\Steam", "InstallPath"),
    (r"HKLM\Software\WOW6432Node\Valve\Steam", "InstallPath"),
)

_REG_VALUE_RE = re.compile(r"(?:SteamPath|InstallPath)\s+REG_SZ\s+(.+)")

PROGRAM_FILES_PATHS: tuple[str, ...] = (
    r"C:\Program Files (x86)\Steam",
    r"C:\Program Files\Steam",
)


def has_launcher(path: Path) -> bool:
    """True if ``path`` exists and contains steam.exe."""
    return path.exists() and (path / STEAM_EXE).exists()


def parse_reg_query(output: str) -> Path | None:
    """Pull the REG_SZ path out of ``reg query`` output."""
    match = _REG_VALUE_RE.search(output)
    if not match:
        return None
    value = match.group(1).strip().replace("\\\\", "\\")
    return Path(value) if value else None


class WindowsRegistryStrategy(RootStrategy):
    """Read the install path Steam records in the registry."""

    def __init__(self, runner: CommandRunner | None = None):
        self._runner = runner or CommandRunner()

    @property
    def name(self) -> str:
        return "windows-registry"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("win32",)

    def attempt(self, context: DiscoveryContext) -> Receipt:
        checked: list[str] = []
        for key, value in REGISTRY_QUERIES:
            receipt = self._runner.run(
                ["reg", "query", key, "/v", value],
                timeout=context.command_timeout,
            )
            if not receipt.ok:
                continue

            path = parse_reg_query(receipt.output)
            if path is None:
                continue

            if has_launcher(path):
                return Receipt.success(
                    source=self.name,
                    output=str(path),
                    metadata={"key": key, "value": value},
                )
            logger.debug("Registry path %s (from %s) has no %s", path, key, STEAM_EXE)
            checked.append(str(path))

        detail = f"; unverified: {', '.join(checked)}" if checked else ""
        return Receipt.failure(source=self.name, error=f"Registry lookup failed{detail}")


class WindowsCommonPathsStrategy(RootStrategy):
    """Probe Program Files and the per-user AppData locations."""

    @property
    def name(self) -> str:
        return "windows-common-paths"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("win32",)

    def candidates(self, context: DiscoveryContext) -> list[Path]:
        paths = [Path(p) for p in PROGRAM_FILES_PATHS]
        for var in ("LOCALAPPDATA", "APPDATA"):
            base = context.env(var)
            if base:
                paths.append(Path(base) / "Steam")
        return paths

    def attempt(self, context: DiscoveryContext) -> Receipt:
        candidates = self.candidates(context)
        for path in candidates:
            if has_launcher(path):
                return Receipt.success(source=self.name, output=str(path))
        return Receipt.failure(
            source=self.name,
            error="No common install path contains steam.exe",
            metadata={"candidates": [str(p) for p in candidates]},
        )
