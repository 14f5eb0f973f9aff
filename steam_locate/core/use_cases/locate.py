"""
Locate use case — compose resolver, library discovery and app lookup.

These are the synchronous forms of the public operations. Each call
rediscovers everything from scratch. Failures that are not already one
of the two public error kinds are re-wrapped into the matching kind,
keeping the original exception as the cause.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from steam_locate.core.errors import SteamAppNotFoundError, SteamNotFoundError
from steam_locate.core.models.settings import Settings
from steam_locate.core.models.steam import SteamApp, SteamLocation, SteamPlatform
from steam_locate.core.services.library_folders import get_library_folders
from steam_locate.core.services.platform import current_platform, is_windows
from steam_locate.core.services.process import is_steam_running
from steam_locate.core.services.steam_apps import find_app_in_libraries, get_installed_apps
from steam_locate.core.services.steam_path import find_steam_path
from steam_locate.core.services.version import get_steam_version

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _degrade(what: str, fn: Callable[[], T], fallback: T) -> T:
    """Run an optional lookup; on failure log it and use ``fallback``."""
    try:
        return fn()
    except Exception as e:
        logger.debug("%s failed, using %r: %s", what, fallback, e)
        return fallback


def find_steam_location(
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> SteamLocation:
    """Find the Steam installation and describe it.

    Raises:
        SteamNotFoundError: When the Steam root cannot be located.
    """
    platform = platform or current_platform()

    try:
        steam_path = find_steam_path(platform, settings=settings)
        library_folders = _degrade(
            "Library folder discovery", lambda: get_library_folders(steam_path), [],
        )

        if is_windows(platform):
            steam_path = str(Path(steam_path))
            library_folders = [str(Path(p)) for p in library_folders]

        running = _degrade(
            "Process detection", lambda: is_steam_running(platform, settings=settings), False,
        )
        version = _degrade(
            "Version detection",
            lambda: get_steam_version(steam_path, platform, settings=settings),
            None,
        )

        return SteamLocation(
            path=steam_path,
            platform=SteamPlatform(platform),
            is_running=running,
            version=version,
            library_folders=tuple(library_folders),
        )
    except SteamNotFoundError:
        raise
    except Exception as e:
        raise SteamNotFoundError(f"Failed to find Steam on {platform}: {e}", platform) from e


def find_library_folders(
    steam_path: str | None = None,
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> list[str]:
    """Library folders for a given root, or for the auto-detected one.

    Raises:
        SteamNotFoundError: When no root was given and none can be found.
    """
    actual_steam_path = steam_path or find_steam_path(platform, settings=settings)
    return get_library_folders(actual_steam_path)


def find_steam_app(
    app_id: str,
    steam_path: str | None = None,
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> SteamApp:
    """Find one app by App ID.

    Args:
        app_id: Steam App ID (e.g. "440").
        steam_path: Steam root; auto-detected when omitted.

    Raises:
        SteamAppNotFoundError: No library folder has a manifest for the app.
        SteamNotFoundError: No root given and Steam cannot be located.
    """
    try:
        actual_steam_path = steam_path or find_steam_path(platform, settings=settings)
        library_folders = get_library_folders(actual_steam_path)
        return find_app_in_libraries(app_id, library_folders)
    except (SteamAppNotFoundError, SteamNotFoundError):
        raise
    except Exception as e:
        raise SteamAppNotFoundError(app_id, f"Error finding Steam app: {e}") from e


def get_installed_steam_apps(
    steam_path: str | None = None,
    *,
    settings: Settings | None = None,
    platform: str | None = None,
) -> list[SteamApp]:
    """Every installed app across all library folders.

    Raises:
        SteamNotFoundError: No root given and Steam cannot be located.
    """
    try:
        actual_steam_path = steam_path or find_steam_path(platform, settings=settings)
        library_folders = get_library_folders(actual_steam_path)
        return get_installed_apps(library_folders, platform)
    except SteamNotFoundError:
        raise
    except Exception as e:
        raise SteamNotFoundError(f"Error getting installed Steam apps: {e}", platform) from e
