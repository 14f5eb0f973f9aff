"""
macOS strategy — the per-user Application Support folder.

On macOS the Steam.app bundle only holds the bootstrapper; steamapps,
libraryfolders.vdf and the client files live under
~/Library/Application Support/Steam, so that directory is the root.
"""

from __future__ import annotations

from pathlib import Path

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.core.models.receipt import Receipt

APPLICATION_SUPPORT_SUBPATH = ("Library", "Application Support", "Steam")


class MacApplicationSupportStrategy(RootStrategy):
    """Accept ~/Library/Application Support/Steam when it exists."""

    @property
    def name(self) -> str:
        return "macos-application-support"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("darwin",)

    def attempt(self, context: DiscoveryContext) -> Receipt:
        path = Path(context.home).joinpath(*APPLICATION_SUPPORT_SUBPATH)
        if path.exists():
            return Receipt.success(source=self.name, output=str(path))
        return Receipt.failure(source=self.name, error=f"Not found: {path}")
