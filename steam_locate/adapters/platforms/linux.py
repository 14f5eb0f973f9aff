"""
Linux strategies — conventional data directories, then ``which``.

Steam on Linux can come from Flatpak, the distro package, a user-local
install or Snap, and each keeps its data tree somewhere else under the
home directory. The candidate list covers them in that order; only if
none exists do we ask the shell where the launcher is.
"""

from __future__ import annotations

from pathlib import Path

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.models.receipt import Receipt

FLATPAK_APP_DIR = (".var", "app", "com.valvesoftware.Steam")

# Layouts relative to a home directory (real, flatpak or snap)
_HOME_LAYOUTS: tuple[tuple[str, ...], ...] = (
    (".local", "share", "Steam"),
    (".steam", "steam"),
    (".steam", "root"),
)


def candidate_paths(context: DiscoveryContext) -> list[Path]:
    """Ordered, de-duplicated root candidates for this home/environment."""
    home = Path(context.home)
    snap_user_data = context.env("SNAP_USER_DATA")
    snap_dir = Path(snap_user_data).absolute() if snap_user_data else home / "snap"

    # Flatpak sandbox
    flatpak_home = home.joinpath(*FLATPAK_APP_DIR)
    raw = [flatpak_home.joinpath(*layout) for layout in _HOME_LAYOUTS]
    # Distro package / user-local
    raw += [home.joinpath(*layout) for layout in _HOME_LAYOUTS]
    raw.append(home / ".steam" / "debian-installation")
    # Snap
    snap_home = snap_dir / "steam" / "common"
    raw += [snap_home.joinpath(*layout) for layout in _HOME_LAYOUTS]

    return list(dict.fromkeys(raw))


class LinuxCommonPathsStrategy(RootStrategy):
    """Return the first conventional Steam data directory that exists."""

    @property
    def name(self) -> str:
        return "linux-common-paths"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("linux",)

    def attempt(self, context: DiscoveryContext) -> Receipt:
        candidates = candidate_paths(context)
        for path in candidates:
            if path.exists():
                return Receipt.success(source=self.name, output=str(path))
        return Receipt.failure(
            source=self.name,
            error="No conventional Steam directory exists",
            metadata={"candidates": [str(p) for p in candidates]},
        )


class LinuxWhichStrategy(RootStrategy):
    """Fall back to ``which steam`` and accept the launcher path."""

    def __init__(self, runner: CommandRunner | None = None):
        self._runner = runner or CommandRunner()

    @property
    def name(self) -> str:
        return "linux-which"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("linux",)

    def attempt(self, context: DiscoveryContext) -> Receipt:
        receipt = self._runner.run(["which", "steam"], timeout=context.command_timeout)
        if not receipt.ok:
            return Receipt.failure(source=self.name, error=receipt.error or "which failed")

        lines = receipt.output.splitlines()
        path = lines[0].strip() if lines else ""
        if path and Path(path).exists():
            return Receipt.success(source=self.name, output=path)
        return Receipt.failure(source=self.name, error=f"which returned no usable path: {path!r}")
