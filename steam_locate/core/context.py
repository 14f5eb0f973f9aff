"""
Discovery context — the settings every lookup runs with.

The active Settings are registered ONCE by whichever entry point starts
the process:

    - CLI:      main.py  → context.set_settings(load_settings(...))
    - Library:  callers  → context.set_settings(Settings(...)), or nothing
    - Tests:    conftest → context.reset_settings()

Module-level singleton. Nothing discovered is stored here, only the
knobs; every lookup still re-reads the filesystem.
"""

from __future__ import annotations

from typing import Optional

from steam_locate.core.models.settings import Settings

_settings: Optional[Settings] = None


def set_settings(settings: Settings) -> None:
    """Register the settings for the current process."""
    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Return the active settings, or defaults if none were registered."""
    return _settings if _settings is not None else Settings()


def reset_settings() -> None:
    """Forget registered settings (back to defaults)."""
    global _settings
    _settings = None
