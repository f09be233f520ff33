"""
Tests for observability — logging setup.
"""

import logging
from pathlib import Path

from lspgen.core.observability.logging_config import (
    parse_level,
    setup_logging,
    setup_logging_from_env,
)


class TestParseLevel:
    def test_known(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("ERROR") == logging.ERROR

    def test_unknown_defaults_to_warning(self):
        assert parse_level("chatty") == logging.WARNING
        assert parse_level(None) == logging.WARNING
        assert parse_level("") == logging.WARNING


class TestSetupLogging:
    def test_console_only(self, restore_root_logger):
        setup_logging("INFO")
        root = restore_root_logger
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_lowers_root_level(self, restore_root_logger, tmp_path: Path):
        log_file = tmp_path / "lspgen.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("lspgen.test").debug("written to file")
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_from_env(self, restore_root_logger):
        setup_logging_from_env(environ={"LSPGEN_LOG_LEVEL": "DEBUG"})
        assert restore_root_logger.level == logging.DEBUG

    def test_explicit_level_wins_over_env(self, restore_root_logger):
        setup_logging_from_env("ERROR", environ={"LSPGEN_LOG_LEVEL": "DEBUG"})
        assert restore_root_logger.level == logging.ERROR
