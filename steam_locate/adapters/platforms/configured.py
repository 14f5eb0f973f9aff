"""
Configured strategy — user-supplied root candidates from steamlocate.yml.

Runs last on every platform, so it only matters when the built-in
heuristics came up empty (portable installs, unusual drives).
"""

from __future__ import annotations

from pathlib import Path

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.core.models.receipt import Receipt


class ConfiguredPathsStrategy(RootStrategy):
    """Probe ``Settings.extra_search_paths`` in order."""

    def __init__(self, paths: list[str] | None = None):
        self._paths = list(paths or [])

    @property
    def name(self) -> str:
        return "configured-paths"

    @property
    def platforms(self) -> tuple[str, ...]:
        return ("win32", "darwin", "linux")

    def attempt(self, context: DiscoveryContext) -> Receipt:
        if not self._paths:
            return Receipt.skip(source=self.name, reason="no extra search paths configured")

        for raw in self._paths:
            path = Path(raw).expanduser()
            if path.is_dir():
                return Receipt.success(source=self.name, output=str(path))
        return Receipt.failure(
            source=self.name,
            error="None of the configured search paths exist",
            metadata={"candidates": self._paths},
        )
