"""
Public error kinds.

Callers only ever see these two: SteamNotFoundError means "ask the user
where Steam is", SteamAppNotFoundError means "this app simply is not
there". Every other failure is degraded or re-wrapped before it escapes.
"""

from __future__ import annotations


class SteamLocateError(Exception):
    """Base class for all steam-locate errors."""


class SteamNotFoundError(SteamLocateError):
    """Raised when the Steam installation cannot be found."""

    def __init__(
        self,
        message: str = "Steam installation not found",
        platform: str | None = None,
    ):
        super().__init__(message)
        self.platform = platform


class SteamAppNotFoundError(SteamLocateError):
    """Raised when no library folder holds a manifest for the app."""

    def __init__(self, app_id: str, message: str | None = None):
        super().__init__(message or f"Steam app with ID {app_id} not found")
        self.app_id = app_id
