"""
Mock strategy — test double for root discovery.

Records every context it is asked to search and answers with a fixed
root path, a failure, or a custom receipt.
"""

from __future__ import annotations

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.core.models.receipt import Receipt


class MockStrategy(RootStrategy):
    """Configurable strategy for testing resolution order.

    By default it misses. Pass ``root`` to make it hit.
    """

    def __init__(
        self,
        strategy_name: str = "mock",
        platforms: tuple[str, ...] = ("win32", "darwin", "linux"),
        root: str | None = None,
        available: bool = True,
    ):
        self._name = strategy_name
        self._platforms = platforms
        self._root = root
        self._available = available
        self._response: Receipt | None = None
        self._call_log: list[DiscoveryContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def platforms(self) -> tuple[str, ...]:
        return self._platforms

    @property
    def call_log(self) -> list[DiscoveryContext]:
        """All contexts this mock has been asked to search."""
        return self._call_log

    @property
    def call_count(self) -> int:
        """Number of times attempt has been called."""
        return len(self._call_log)

    def is_available(self) -> bool:
        return self._available

    def set_response(self, receipt: Receipt) -> None:
        """Answer every attempt with this receipt."""
        self._response = receipt

    def attempt(self, context: DiscoveryContext) -> Receipt:
        self._call_log.append(context)

        if self._response is not None:
            return self._response
        if self._root is not None:
            return Receipt.success(source=self._name, output=self._root, metadata={"mock": True})
        return Receipt.failure(source=self._name, error="[mock] not found")

    def reset(self) -> None:
        """Clear call log and custom response."""
        self._call_log.clear()
        self._response = None
