"""
Strategy registry — ordered dispatch of root-discovery strategies.

The registry is the single point of strategy management. Strategies are
registered in priority order; resolution walks the ones serving the
active platform and stops at the first hit, so a later strategy (and
any command it would spawn) never runs once an earlier one succeeded.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.core.models.receipt import Receipt

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Central registry and dispatcher for root strategies.

    Features:
        - Register strategies by name (registration order = priority)
        - Per-platform ordered lookup
        - First-hit resolution with a record of every attempt
    """

    def __init__(self) -> None:
        self._strategies: dict[str, RootStrategy] = {}

    def register(self, strategy: RootStrategy) -> None:
        """Register a strategy after the ones already registered."""
        name = strategy.name
        if name in self._strategies:
            logger.warning("Overwriting existing strategy: %s", name)
        self._strategies[name] = strategy
        logger.debug("Registered strategy: %s", name)

    def get(self, name: str) -> RootStrategy | None:
        """Look up a strategy by name."""
        return self._strategies.get(name)

    def list_strategies(self) -> list[str]:
        """List all registered strategy names, in priority order."""
        return list(self._strategies.keys())

    def strategies_for(self, platform: str) -> list[RootStrategy]:
        """Strategies serving a platform, in priority order."""
        return [s for s in self._strategies.values() if platform in s.platforms]

    def supports(self, platform: str) -> bool:
        """Whether any strategy serves this platform."""
        return bool(self.strategies_for(platform))

    def strategy_status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered strategy."""
        status = {}
        for name, strategy in self._strategies.items():
            try:
                available = strategy.is_available()
            except Exception:
                available = False
            status[name] = {
                "name": name,
                "available": available,
                "platforms": list(strategy.platforms),
                "type": strategy.__class__.__name__,
            }
        return status

    def resolve(self, context: DiscoveryContext) -> Receipt:
        """Try each strategy for ``context.platform`` until one succeeds.

        Returns:
            The winning strategy's receipt, or a failure receipt whose
            ``metadata["attempts"]`` lists why each strategy missed.
        """
        start_time = time.monotonic()
        attempts: list[dict[str, Any]] = []

        for strategy in self.strategies_for(context.platform):
            if not strategy.is_available():
                receipt = Receipt.skip(source=strategy.name, reason="strategy not available")
            else:
                try:
                    receipt = strategy.attempt(context)
                except Exception as e:
                    # Strategies should never raise, but one that does is just a miss
                    logger.error("Strategy %s raised during attempt: %s", strategy.name, e)
                    receipt = Receipt.failure(source=strategy.name, error=f"Unexpected error: {e}")

            attempts.append({
                "strategy": strategy.name,
                "status": receipt.status,
                "detail": receipt.detail,
            })

            if receipt.ok:
                logger.info("Steam root found by %s: %s", strategy.name, receipt.output)
                receipt.metadata["attempts"] = attempts
                return receipt

            logger.debug("Strategy %s missed: %s", strategy.name, receipt.detail)

        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        return Receipt.failure(
            source="registry",
            error=f"No strategy located Steam on {context.platform}",
            duration_ms=elapsed_ms,
            metadata={"attempts": attempts},
        )
