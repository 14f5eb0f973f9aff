"""
App lookup and inventory — read appmanifest files across library folders.

``find_app_in_libraries`` answers "where is app X": the first library
folder holding its manifest wins. ``get_installed_apps`` walks every
manifest in every library folder and keeps the apps whose install
directory is really on disk, collapsing duplicates that show up through
more than one library folder.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from steam_locate.core.errors import SteamAppNotFoundError
from steam_locate.core.models.steam import SteamApp
from steam_locate.core.services.manifest import (
    extract_fields,
    parse_size,
    parse_timestamp,
)
from steam_locate.core.services.platform import current_platform, is_windows

logger = logging.getLogger(__name__)

COMMON_DIR = "common"
MANIFEST_FILENAME_RE = re.compile(r"^appmanifest_(\d+)\.acf$")


def manifest_filename(app_id: str) -> str:
    return f"appmanifest_{app_id}.acf"


def parse_app_manifest(app_id: str, content: str, library_folder: str) -> SteamApp:
    """Build a SteamApp from manifest text, checking installdir on disk.

    The declared install directory is only reported when it exists.
    """
    fields = extract_fields(content)

    install_dir: Path | None = None
    if fields.get("installdir"):
        install_dir = Path(library_folder) / COMMON_DIR / fields["installdir"]
    is_installed = install_dir is not None and install_dir.exists()

    return SteamApp(
        app_id=app_id,
        name=fields.get("name") or None,
        install_dir=str(install_dir) if is_installed else None,
        size_on_disk=parse_size(fields.get("SizeOnDisk")),
        is_installed=is_installed,
        last_updated=parse_timestamp(fields.get("LastUpdated")),
    )


def match_app_in_folder(app_id: str, library_folder: str) -> SteamApp | None:
    """Read one folder's manifest for ``app_id``.

    Returns None when the manifest is absent or cannot be read.
    """
    manifest_path = Path(library_folder) / manifest_filename(app_id)
    if not manifest_path.exists():
        return None

    try:
        content = manifest_path.read_text(encoding="utf-8", errors="replace")
        return parse_app_manifest(app_id, content, library_folder)
    except (OSError, ValueError) as e:
        logger.debug("Skipping unreadable manifest %s: %s", manifest_path, e)
        return None


def find_app_in_libraries(app_id: str, library_folders: list[str]) -> SteamApp:
    """Locate an app's manifest in the first library folder that has one.

    Raises:
        SteamAppNotFoundError: No library folder yields a readable manifest.
    """
    for library_folder in library_folders:
        app = match_app_in_folder(app_id, library_folder)
        if app is not None:
            return app
    raise SteamAppNotFoundError(app_id)


def dedup_key(app: SteamApp, platform: str) -> str:
    """Identity of an installed app: id plus normalized install path.

    Case-insensitive on Windows only.
    """
    key = f"{app.app_id}|{Path(app.install_dir or '')}"
    return key.lower() if is_windows(platform) else key


def get_installed_apps(library_folders: list[str], platform: str | None = None) -> list[SteamApp]:
    """Every installed app across the library folders.

    Order follows library folder order, then directory listing order.
    Unlistable folders and unreadable manifests are skipped; this never
    raises.
    """
    platform = platform or current_platform()
    apps: list[SteamApp] = []
    seen: set[str] = set()

    for library_folder in library_folders:
        try:
            manifests = [p.name for p in Path(library_folder).glob("appmanifest_*.acf")]
        except OSError as e:
            logger.debug("Skipping unlistable library folder %s: %s", library_folder, e)
            continue

        for filename in manifests:
            match = MANIFEST_FILENAME_RE.match(filename)
            if not match:
                continue

            app = match_app_in_folder(match.group(1), library_folder)
            if app is None or not app.is_installed or not app.install_dir:
                continue

            key = dedup_key(app, platform)
            if key in seen:
                logger.debug("Duplicate sighting of app %s at %s", app.app_id, app.install_dir)
                continue
            seen.add(key)
            apps.append(app)

    logger.debug("Found %d installed app(s) in %d library folder(s)", len(apps), len(library_folders))
    return apps
