"""
Logging configuration for the steamlocate CLI.

Library callers configure logging themselves; importing steam_locate
never touches the root logger. The CLI calls ``resolve_level`` and then
``setup_logging`` once at startup, and every module's
``logging.getLogger(__name__)`` inherits the result.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  STEAMLOCATE_LOG_LEVEL  >  WARNING

A second, file-only level lets a user keep DEBUG probe traces in
STEAMLOCATE_LOG_FILE while the terminal stays quiet.
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "STEAMLOCATE_LOG_LEVEL"
ENV_LOG_FILE = "STEAMLOCATE_LOG_FILE"
ENV_LOG_FILE_LEVEL = "STEAMLOCATE_LOG_FILE_LEVEL"

# (format, datefmt) by the most verbose level they apply to
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_CONSOLE_DEFAULT_FORMAT = "%(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d  %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# asyncio reports slow to_thread callbacks at DEBUG
_NOISY_LOGGERS = ("asyncio",)


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: dict[str, str] | None = None,
) -> str:
    """Pick the console level from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LOG_LEVEL) or "WARNING"


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_DEFAULT_FORMAT, None
    for threshold, threshold_fmt, threshold_datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            fmt, datefmt = threshold_fmt, threshold_datefmt
            break

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Install console (and optional file) handlers on the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file path.
        log_file_level: Level for the file; defaults to ``level``.
        quiet_third_party: Hold ``_NOISY_LOGGERS`` at WARNING unless the
            console is at DEBUG.
    """
    console_level = _parse_level(level)
    handlers = [_console_handler(console_level)]
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))
        root_level = min(root_level, file_level)

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(root_level)

    if quiet_third_party and console_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown or empty is WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
