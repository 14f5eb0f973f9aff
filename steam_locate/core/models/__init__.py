"""
Domain models — Pydantic types for Steam discovery.

All models are re-exported here for convenient access:

    from steam_locate.core.models import SteamLocation, SteamApp, Receipt, Settings
"""

from steam_locate.core.models.receipt import Receipt, ReceiptStatus
from steam_locate.core.models.settings import DEFAULT_COMMAND_TIMEOUT, Settings
from steam_locate.core.models.steam import SteamApp, SteamLocation, SteamPlatform

__all__ = [
    "DEFAULT_COMMAND_TIMEOUT",
    # receipt.py
    "Receipt",
    "ReceiptStatus",
    # settings.py
    "Settings",
    # steam.py
    "SteamApp",
    "SteamLocation",
    "SteamPlatform",
]
