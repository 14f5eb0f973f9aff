"""
Async API — non-blocking forms of the public operations.

Each coroutine hands the synchronous operation to a worker thread with
``asyncio.to_thread`` and awaits it, so an event loop keeps running
while the filesystem and process queries happen. The discovery itself
is the same code as the sync form and runs as one unit.
"""

from __future__ import annotations

import asyncio

from steam_locate.core.models.settings import Settings
from steam_locate.core.models.steam import SteamApp, SteamLocation
from steam_locate.core.services.process import is_steam_running
from steam_locate.core.use_cases.locate import (
    find_steam_app,
    find_steam_location,
    get_installed_steam_apps,
)


async def find_steam_location_async(*, settings: Settings | None = None) -> SteamLocation:
    """Async form of :func:`find_steam_location`."""
    return await asyncio.to_thread(find_steam_location, settings=settings)


async def is_steam_running_async(*, settings: Settings | None = None) -> bool:
    """Async form of :func:`is_steam_running`."""
    return await asyncio.to_thread(is_steam_running, settings=settings)


async def find_steam_app_async(
    app_id: str,
    steam_path: str | None = None,
    *,
    settings: Settings | None = None,
) -> SteamApp:
    """Async form of :func:`find_steam_app`."""
    return await asyncio.to_thread(find_steam_app, app_id, steam_path, settings=settings)


async def get_installed_steam_apps_async(
    steam_path: str | None = None,
    *,
    settings: Settings | None = None,
) -> list[SteamApp]:
    """Async form of :func:`get_installed_steam_apps`."""
    return await asyncio.to_thread(get_installed_steam_apps, steam_path, settings=settings)
