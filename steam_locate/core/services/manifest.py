"""
Manifest extraction — pull the few fields we need out of VDF/ACF text.

Steam's libraryfolders.vdf and appmanifest_<id>.acf files are nested,
brace-delimited ``"key" "value"`` documents. Only a handful of keys are
ever read, so each one is extracted with its own pattern instead of
parsing the whole tree. A key that is missing or malformed simply comes
back as None; it never spoils the other fields.

Limitation: the first occurrence of a key wins wherever it is nested.
That holds for the keys used here, which Valve only writes at the top
level of an AppState block.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from functools import lru_cache

# Keys read from appmanifest_<id>.acf
APP_MANIFEST_KEYS = ("name", "installdir", "SizeOnDisk", "LastUpdated")

_PATH_RE = re.compile(r'"path"\s*"([^"]+)"')


@lru_cache(maxsize=32)
def _field_pattern(key: str) -> re.Pattern[str]:
    return re.compile(r'"' + re.escape(key) + r'"\s*"([^"]+)"')


def extract_field(text: str, key: str) -> str | None:
    """Value of the first ``"key" "value"`` pair, or None."""
    match = _field_pattern(key).search(text)
    return match.group(1) if match else None


def extract_fields(text: str, keys: tuple[str, ...] = APP_MANIFEST_KEYS) -> dict[str, str]:
    """Extract each key independently; absent keys are left out."""
    fields: dict[str, str] = {}
    for key in keys:
        value = extract_field(text, key)
        if value is not None:
            fields[key] = value
    return fields


def extract_library_paths(text: str) -> list[str]:
    r"""Every ``"path"`` value in appearance order.

    VDF escapes backslashes, so ``D:\\SteamLibrary`` in the file is
    returned as ``D:\SteamLibrary``.
    """
    return [m.group(1).replace("\\\\", "\\") for m in _PATH_RE.finditer(text)]


def parse_size(raw: str | None) -> int | None:
    """Base-10 byte count, or None if absent, non-numeric or negative."""
    if raw is None:
        return None
    try:
        size = int(raw.strip(), 10)
    except ValueError:
        return None
    return size if size >= 0 else None


def parse_timestamp(raw: str | None) -> datetime | None:
    """Unix epoch seconds as an aware UTC datetime, or None."""
    if raw is None:
        return None
    try:
        seconds = int(raw.strip(), 10)
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (ValueError, OverflowError, OSError):
        return None
