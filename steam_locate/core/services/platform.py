"""
Platform detection — which discovery chain applies to this host.
"""

from __future__ import annotations

import sys

from steam_locate.core.models.steam import SteamPlatform


def current_platform() -> str:
    """The raw platform tag of the running interpreter (``sys.platform``)."""
    return sys.platform


def as_steam_platform(tag: str) -> SteamPlatform | None:
    """Map a raw tag onto a supported platform, or None if unsupported."""
    try:
        return SteamPlatform(tag)
    except ValueError:
        return None


def platform_label(tag: str) -> str:
    """Readable name for messages; unknown tags are shown as-is."""
    steam_platform = as_steam_platform(tag)
    return steam_platform.label if steam_platform else tag


def is_windows(tag: str) -> bool:
    return tag == SteamPlatform.WINDOWS
