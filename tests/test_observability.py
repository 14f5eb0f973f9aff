"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

from steam_locate.core.observability.logging_config import (
    _parse_level,
    resolve_level,
    setup_logging,
)


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_unknown_falls_back_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING

    def test_empty(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_replaces_existing_handlers(self):
        setup_logging(level="INFO")
        setup_logging(level="INFO")
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "steamlocate.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("steam_locate.test").debug("probe message")
        for handler in root.handlers:
            handler.flush()
        assert "probe message" in log_file.read_text(encoding="utf-8")

        for handler in root.handlers:
            handler.close()

    def test_quiet_third_party(self):
        setup_logging(level="INFO", quiet_third_party=True)
        assert logging.getLogger("asyncio").level == logging.WARNING


class TestResolveLevel:
    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == "DEBUG"
        assert resolve_level(verbose=True, quiet=True) == "INFO"
        assert resolve_level(quiet=True, environ={"STEAMLOCATE_LOG_LEVEL": "DEBUG"}) == "ERROR"

    def test_environment(self):
        assert resolve_level(environ={"STEAMLOCATE_LOG_LEVEL": "INFO"}) == "INFO"

    def test_default(self):
        assert resolve_level(environ={}) == "WARNING"
