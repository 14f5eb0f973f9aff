"""
Strategy base — the contract between the path resolver and each way
of finding Steam.

A strategy is one discovery heuristic (a registry lookup, a list of
conventional paths, a ``which`` call). The resolver only talks to
strategies through this protocol and tries them in order until one
succeeds.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, Field

from steam_locate.core.models.receipt import Receipt
from steam_locate.core.models.settings import DEFAULT_COMMAND_TIMEOUT


class DiscoveryContext(BaseModel):
    """Everything a strategy needs to look for Steam.

    Built once per resolution from the real process state; tests build
    it by hand with a fake home and environment.
    """

    platform: str
    home: str
    environ: dict[str, str] = Field(default_factory=dict)
    command_timeout: float = DEFAULT_COMMAND_TIMEOUT

    @classmethod
    def from_process(cls, platform: str, command_timeout: float = DEFAULT_COMMAND_TIMEOUT) -> DiscoveryContext:
        """Snapshot home directory and environment of the running process."""
        return cls(
            platform=platform,
            home=str(Path.home()),
            environ=dict(os.environ),
            command_timeout=command_timeout,
        )

    def env(self, name: str, default: str = "") -> str:
        """Look up an environment variable from the snapshot."""
        return self.environ.get(name, default)


class RootStrategy(ABC):
    """Abstract base class for root-directory discovery strategies.

    Strategies report through Receipts and NEVER raise: a miss is a
    failed receipt, which tells the resolver to try the next strategy.

    To add a strategy:
        1. Subclass RootStrategy
        2. Implement name, platforms, attempt
        3. Register it in the StrategyRegistry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The strategy identifier (e.g., 'windows-registry')."""

    @property
    @abstractmethod
    def platforms(self) -> tuple[str, ...]:
        """Platform tags this strategy serves."""

    def is_available(self) -> bool:
        """Whether the strategy can run on this host at all.

        Should be fast and never raise.
        """
        return True

    @abstractmethod
    def attempt(self, context: DiscoveryContext) -> Receipt:
        """Look for the Steam root.

        Returns a success receipt whose ``output`` is the root path, or
        a failure receipt. MUST never raise.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
