"""
Path resolver — find the Steam root directory on this host.

Each platform has its own ordered chain of strategies (see
adapters/platforms). The resolver builds the chain, lets the registry
walk it, and turns exhaustion into SteamNotFoundError. Unsupported
platforms fail before anything on disk is touched.
"""

from __future__ import annotations

import logging

from steam_locate.adapters.base import DiscoveryContext
from steam_locate.adapters.platforms.configured import ConfiguredPathsStrategy
from steam_locate.adapters.platforms.linux import LinuxCommonPathsStrategy, LinuxWhichStrategy
from steam_locate.adapters.platforms.macos import MacApplicationSupportStrategy
from steam_locate.adapters.platforms.windows import (
    WindowsCommonPathsStrategy,
    WindowsRegistryStrategy,
)
from steam_locate.adapters.registry import StrategyRegistry
from steam_locate.adapters.shell.command import CommandRunner
from steam_locate.core.context import get_settings
from steam_locate.core.errors import SteamNotFoundError
from steam_locate.core.models.settings import Settings
from steam_locate.core.services.platform import current_platform, platform_label

logger = logging.getLogger(__name__)


def default_registry(
    settings: Settings | None = None,
    runner: CommandRunner | None = None,
) -> StrategyRegistry:
    """Build the standard strategy chain for every platform.

    Registration order is resolution order within each platform.
    """
    settings = settings or get_settings()
    runner = runner or CommandRunner(timeout=settings.command_timeout)

    registry = StrategyRegistry()
    # Windows
    registry.register(WindowsRegistryStrategy(runner))
    registry.register(WindowsCommonPathsStrategy())
    # macOS
    registry.register(MacApplicationSupportStrategy())
    # Linux
    registry.register(LinuxCommonPathsStrategy())
    registry.register(LinuxWhichStrategy(runner))
    # All platforms, last resort
    registry.register(ConfiguredPathsStrategy(settings.extra_search_paths))
    return registry


def find_steam_path(
    platform: str | None = None,
    *,
    settings: Settings | None = None,
    registry: StrategyRegistry | None = None,
    context: DiscoveryContext | None = None,
) -> str:
    """Locate the Steam root directory.

    Args:
        platform: Platform tag to search for (default: this host).
        settings: Settings to use (default: the active settings).
        registry: Strategy chain override (default: default_registry()).
        context: Discovery context override (default: snapshot of this process).

    Returns:
        The root path reported by the first strategy that hit.

    Raises:
        SteamNotFoundError: Unsupported platform, or every strategy missed.
    """
    settings = settings or get_settings()
    if context is not None:
        platform = context.platform
    platform = platform or current_platform()

    registry = registry or default_registry(settings)
    if not registry.supports(platform):
        raise SteamNotFoundError(f"Unsupported platform: {platform}", platform)

    if context is None:
        context = DiscoveryContext.from_process(platform, command_timeout=settings.command_timeout)

    receipt = registry.resolve(context)
    if receipt.ok:
        return receipt.output

    logger.debug("Steam root not found; attempts: %s", receipt.metadata.get("attempts"))
    raise SteamNotFoundError(
        f"Could not locate Steam installation on {platform_label(platform)}",
        platform,
    )
