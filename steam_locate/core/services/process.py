"""
Process detection — is the Steam client running right now?

One process-table query per platform, bounded by the command timeout.
Any failure (no match, timeout, missing tool) reads as "not running".
"""

from __future__ import annotations

import logging

from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.context import get_settings
from steam_locate.core.models.settings import Settings
from steam_locate.core.services.platform import current_platform

logger = logging.getLogger(__name__)

PROCESS_QUERIES: dict[str, list[str]] = {
    "win32": ["tasklist", "/FI", "IMAGENAME eq steam.exe", "/FO", "CSV", "/NH"],
    "darwin": ["pgrep", "-f", "Steam.app"],
    "linux": ["pgrep", "-f", "steam"],
}


def is_steam_running(
    platform: str | None = None,
    *,
    settings: Settings | None = None,
    runner: CommandRunner | None = None,
) -> bool:
    """Check the process table for a Steam client process."""
    platform = platform or current_platform()
    command = PROCESS_QUERIES.get(platform)
    if command is None:
        return False

    settings = settings or get_settings()
    runner = runner or CommandRunner(timeout=settings.command_timeout)

    receipt = runner.run(command)
    if not receipt.ok:
        # pgrep exits 1 when nothing matches
        return False

    if platform == "win32":
        # tasklist exits 0 with an INFO line when nothing matches
        running = "steam.exe" in receipt.output.lower()
    else:
        running = bool(receipt.output.strip())

    logger.debug("Steam running on %s: %s", platform, running)
    return running
