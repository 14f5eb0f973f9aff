"""
steam-locate — CLI entrypoint.

Usage:
    steamlocate --help
    steamlocate locate
    steamlocate app 440 --json
    python -m steam_locate.main apps
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from steam_locate import __version__
from steam_locate.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="steamlocate")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to steamlocate.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """steam-locate — find Steam, its library folders and installed apps."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
        quiet_third_party=not debug,
    )

    # `config show` reports config errors itself
    if ctx.invoked_subcommand == "config":
        return

    from steam_locate.core.config.loader import ConfigError, load_settings
    from steam_locate.core.context import set_settings

    try:
        set_settings(load_settings(ctx.obj["config_path"]))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


def _fail(message: str, as_json: bool, **extra: object) -> None:
    if as_json:
        click.echo(json.dumps({"error": message, **extra}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def locate(ctx: click.Context, as_json: bool) -> None:
    """Find the Steam installation."""
    from steam_locate.core.errors import SteamNotFoundError
    from steam_locate.core.use_cases.locate import find_steam_location

    try:
        location = find_steam_location()
    except SteamNotFoundError as e:
        _fail(str(e), as_json, platform=e.platform)
        return

    if as_json:
        click.echo(json.dumps(location.to_dict(), indent=2))
        return

    quiet = ctx.obj.get("quiet", False)
    if quiet:
        click.echo(location.path)
        return

    click.secho(f"\n🎮 Steam ({location.platform.label})", fg="cyan", bold=True)
    click.echo(f"   📁 {location.path}")
    running = "yes" if location.is_running else "no"
    click.echo(f"   Running: {running}")
    click.echo(f"   Version: {location.version or 'unknown'}")
    click.secho(f"   Library folders: {len(location.library_folders)}", fg="white", bold=True)
    for folder in location.library_folders:
        click.echo(f"     • {folder}")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def running(as_json: bool) -> None:
    """Check whether the Steam client is running."""
    from steam_locate.core.services.process import is_steam_running

    is_running = is_steam_running()
    if as_json:
        click.echo(json.dumps({"running": is_running}))
    elif is_running:
        click.secho("✅ Steam is running", fg="green")
    else:
        click.secho("⏹  Steam is not running", fg="yellow")


@cli.command()
@click.option("--steam-path", default=None, help="Steam root (default: auto-detect).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def libraries(steam_path: str | None, as_json: bool) -> None:
    """List Steam library (steamapps) folders."""
    from steam_locate.core.errors import SteamNotFoundError
    from steam_locate.core.use_cases.locate import find_library_folders

    try:
        folders = find_library_folders(steam_path)
    except SteamNotFoundError as e:
        _fail(str(e), as_json, platform=e.platform)
        return

    if as_json:
        click.echo(json.dumps({"library_folders": folders}, indent=2))
        return

    if not folders:
        click.secho("No library folders found", fg="yellow")
        return
    for folder in folders:
        click.echo(folder)


@cli.command()
@click.argument("app_id")
@click.option("--steam-path", default=None, help="Steam root (default: auto-detect).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def app(app_id: str, steam_path: str | None, as_json: bool) -> None:
    """Show one app by App ID."""
    from steam_locate.core.errors import SteamAppNotFoundError, SteamNotFoundError
    from steam_locate.core.use_cases.locate import find_steam_app

    try:
        found = find_steam_app(app_id, steam_path)
    except SteamAppNotFoundError as e:
        _fail(str(e), as_json, app_id=e.app_id)
        return
    except SteamNotFoundError as e:
        _fail(str(e), as_json, platform=e.platform)
        return

    if as_json:
        click.echo(json.dumps(found.to_dict(), indent=2))
        return

    click.secho(f"\n🎮 {found.name or found.app_id}", fg="cyan", bold=True)
    click.echo(f"   App ID: {found.app_id}")
    marker = "✓" if found.is_installed else "✗"
    click.echo(f"   Installed: {marker}")
    if found.install_dir:
        click.echo(f"   📁 {found.install_dir}")
    if found.size_on_disk is not None:
        click.echo(f"   Size: {_format_size(found.size_on_disk)}")
    if found.last_updated is not None:
        click.echo(f"   Updated: {found.last_updated.isoformat()}")
    click.echo()


@cli.command()
@click.option("--steam-path", default=None, help="Steam root (default: auto-detect).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def apps(steam_path: str | None, as_json: bool) -> None:
    """List every installed app."""
    from steam_locate.core.errors import SteamNotFoundError
    from steam_locate.core.use_cases.locate import get_installed_steam_apps

    try:
        installed = get_installed_steam_apps(steam_path)
    except SteamNotFoundError as e:
        _fail(str(e), as_json, platform=e.platform)
        return

    if as_json:
        click.echo(json.dumps({
            "total": len(installed),
            "apps": [a.to_dict() for a in installed],
        }, indent=2))
        return

    click.secho(f"\n   Installed apps: {len(installed)}", fg="white", bold=True)
    for item in installed:
        size = f"  ({_format_size(item.size_on_disk)})" if item.size_on_disk is not None else ""
        click.echo(f"     • [{item.app_id}] {item.name or '?'}{size}  → {item.install_dir}")
    click.echo()


def _format_size(num_bytes: int) -> str:
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show the effective settings."""
    from steam_locate.core.config.loader import ConfigError, find_config_file, load_settings

    path = ctx.obj.get("config_path") or find_config_file()
    try:
        settings = load_settings(path)
    except ConfigError as e:
        _fail(str(e), as_json)
        return

    if as_json:
        click.echo(json.dumps({
            "config_path": str(path) if path else None,
            "settings": settings.model_dump(mode="json"),
        }, indent=2))
        return

    source = str(path) if path else "(defaults, no config file)"
    click.secho(f"⚙️  {source}", fg="cyan")
    click.echo(f"   command_timeout: {settings.command_timeout}s")
    click.echo("   extra_search_paths:")
    if not settings.extra_search_paths:
        click.echo("     (none)")
    for extra in settings.extra_search_paths:
        click.echo(f"     • {extra}")


def main() -> None:
    """Entry point for ``python -m steam_locate.main``."""
    cli(obj={})


if __name__ == "__main__":
    main()
