"""Adapters — OS bindings used by discovery.

Public re-exports for convenient access.
"""

from steam_locate.adapters.base import DiscoveryContext, RootStrategy
from steam_locate.adapters.mock import MockStrategy
from steam_locate.adapters.registry import StrategyRegistry
from steam_locate.adapters.shell.command import CommandRunner

__all__ = [
    "CommandRunner",
    "DiscoveryContext",
    "MockStrategy",
    "RootStrategy",
    "StrategyRegistry",
]
