"""
Library folder discovery — every steamapps directory Steam knows about.

The root's own steamapps comes first, then each library declared in
steamapps/libraryfolders.vdf, in file order. Only directories that exist
are kept, and duplicates are dropped by exact string comparison (no
case folding here, on any platform).

Best effort: this never raises. An unreadable libraryfolders.vdf still
yields the main folder; any other failure yields an empty list.
"""

from __future__ import annotations

import logging
from pathlib import Path

from steam_locate.core.services.manifest import extract_library_paths

logger = logging.getLogger(__name__)

STEAMAPPS_DIR = "steamapps"
LIBRARY_FOLDERS_FILE = "libraryfolders.vdf"


def get_library_folders(steam_path: str) -> list[str]:
    """Ordered, de-duplicated steamapps folders for a Steam root.

    Args:
        steam_path: The Steam root directory.

    Returns:
        Existing steamapps directories, main folder first. Empty on failure.
    """
    try:
        return _collect_library_folders(steam_path)
    except Exception as e:
        logger.debug("Library folder discovery failed for %s: %s", steam_path, e)
        return []


def _collect_library_folders(steam_path: str) -> list[str]:
    folders: list[str] = []

    main_folder = Path(steam_path) / STEAMAPPS_DIR
    if main_folder.exists():
        folders.append(str(main_folder))

    vdf_path = main_folder / LIBRARY_FOLDERS_FILE
    if not vdf_path.exists():
        return folders

    try:
        content = vdf_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read %s, keeping main folder only: %s", vdf_path, e)
        return folders

    for raw_path in extract_library_paths(content):
        library = Path(raw_path) / STEAMAPPS_DIR
        if str(library) in folders:
            continue
        if library.exists():
            folders.append(str(library))
        else:
            logger.debug("Declared library folder does not exist: %s", library)

    return folders
