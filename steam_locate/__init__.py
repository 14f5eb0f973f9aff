"""
steam-locate — find the Steam client, its library folders and its apps.

    from steam_locate import find_steam_location, find_steam_app

    location = find_steam_location()
    tf2 = find_steam_app("440")

Every operation has a non-blocking ``*_async`` twin for asyncio code.
"""

from steam_locate.api import (
    find_steam_app_async,
    find_steam_location_async,
    get_installed_steam_apps_async,
    is_steam_running_async,
)
from steam_locate.core.errors import (
    SteamAppNotFoundError,
    SteamLocateError,
    SteamNotFoundError,
)
from steam_locate.core.models import Settings, SteamApp, SteamLocation, SteamPlatform
from steam_locate.core.services.library_folders import get_library_folders
from steam_locate.core.services.process import is_steam_running
from steam_locate.core.services.steam_path import find_steam_path
from steam_locate.core.use_cases.locate import (
    find_steam_app,
    find_steam_location,
    get_installed_steam_apps,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "SteamApp",
    "SteamAppNotFoundError",
    "SteamLocateError",
    "SteamLocation",
    "SteamNotFoundError",
    "SteamPlatform",
    "__version__",
    "find_steam_app",
    "find_steam_app_async",
    "find_steam_location",
    "find_steam_location_async",
    "find_steam_path",
    "get_installed_steam_apps",
    "get_installed_steam_apps_async",
    "get_library_folders",
    "is_steam_running",
    "is_steam_running_async",
]
