"""
Steam models — the values handed back to callers.

Both models are frozen: they are computed fresh from the filesystem on
every call and never mutated afterwards.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SteamPlatform(StrEnum):
    """Host platforms Steam discovery knows how to search."""

    WINDOWS = "win32"
    MACOS = "darwin"
    LINUX = "linux"

    @property
    def label(self) -> str:
        """Human-readable platform name."""
        return _PLATFORM_LABELS[self]


_PLATFORM_LABELS = {
    SteamPlatform.WINDOWS: "Windows",
    SteamPlatform.MACOS: "macOS",
    SteamPlatform.LINUX: "Linux",
}


class SteamLocation(BaseModel):
    """Where Steam lives on this machine and what state it is in."""

    model_config = ConfigDict(frozen=True)

    path: str                          # root installation directory
    platform: SteamPlatform
    is_running: bool = False
    version: str | None = None
    library_folders: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class SteamApp(BaseModel):
    """One app (game, tool, runtime) described by an appmanifest file.

    ``install_dir`` is only set when the directory declared by the
    manifest was verified to exist, and ``is_installed`` mirrors that.
    """

    model_config = ConfigDict(frozen=True)

    app_id: str
    name: str | None = None
    install_dir: str | None = None
    size_on_disk: int | None = Field(default=None, ge=0)  # bytes
    is_installed: bool = False
    last_updated: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
