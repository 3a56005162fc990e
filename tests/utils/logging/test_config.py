# ABOUTME: Tests for logging configuration module
# ABOUTME: Validates dual-mode logging setup, stdlib interception and third-party suppression

import logging
import os
from pathlib import Path
from unittest.mock import patch

import structlog
from loguru import logger

from wikirights_export.utils.logging.config import (
    InterceptHandler,
    LoggingMode,
    configure_logging,
    detect_logging_mode,
    get_logging_status,
)


class TestDetectLoggingMode:
    """Test logging mode detection logic."""

    def test_detect_mode_from_env_interactive(self):
        with patch.dict(os.environ, {"WIKIRIGHTS_EXPORT_LOG_MODE": "interactive"}):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_env_production(self):
        with patch.dict(os.environ, {"WIKIRIGHTS_EXPORT_LOG_MODE": "PRODUCTION"}):
            assert detect_logging_mode() == LoggingMode.PRODUCTION

    def test_detect_mode_from_env_invalid(self):
        with (
            patch.dict(os.environ, {"WIKIRIGHTS_EXPORT_LOG_MODE": "invalid"}),
            patch("sys.stdout.isatty", return_value=True),
        ):
            assert detect_logging_mode() == LoggingMode.INTERACTIVE

    def test_detect_mode_from_tty_production(self):
        with patch.dict(os.environ, {}, clear=True), patch("sys.stdout.isatty", return_value=False):
            assert detect_logging_mode() == LoggingMode.PRODUCTION


class TestConfigureLogging:
    """Test logging configuration functionality."""

    def teardown_method(self):
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.WARNING)
        for logger_name in ["httpx", "httpcore", "urllib3", "py.warnings"]:
            logging.getLogger(logger_name).setLevel(logging.NOTSET)
        logging.captureWarnings(False)

        logger.remove()
        structlog.reset_defaults()

    def test_configure_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO")

        assert Path("logs").exists()
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_configure_production_mode_does_not_create_log_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        assert not Path("logs").exists()
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_configure_custom_log_level(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_stdlib_logging_routed_to_loguru(self):
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        root_handlers = logging.getLogger().handlers
        assert len(root_handlers) == 1
        assert isinstance(root_handlers[0], InterceptHandler)

    def test_structlog_events_reach_loguru_sinks(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        configure_logging(mode=LoggingMode.PRODUCTION, log_level="INFO")

        messages: list[str] = []
        logger.add(lambda message: messages.append(str(message)), level="INFO", format="{message}")

        structlog.get_logger("wikirights_export.tests").info("Got page listing batch", pages=3)

        assert any("Got page listing batch" in m and "pages=3" in m for m in messages)

    def test_custom_log_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        custom_log_file = tmp_path / "custom.log"

        configure_logging(mode=LoggingMode.INTERACTIVE, log_level="INFO", log_file=str(custom_log_file))
        logging.getLogger("wikirights_export").warning("written to custom file")
        logger.complete()

        assert "written to custom file" in custom_log_file.read_text(encoding="utf-8")


class TestGetLoggingStatus:
    """Test logging status reporting."""

    def test_get_status_interactive_mode(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        Path("logs").mkdir()

        with patch("wikirights_export.utils.logging.config.detect_logging_mode", return_value=LoggingMode.INTERACTIVE):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.INTERACTIVE
        assert status["log_directory"] is not None
        assert status["log_files"]["main"].endswith("wikirights-export.log")
        assert "httpx" in status["third_party_suppressed"]

    def test_get_status_production_mode(self):
        with patch("wikirights_export.utils.logging.config.detect_logging_mode", return_value=LoggingMode.PRODUCTION):
            status = get_logging_status()

        assert status["mode"] == LoggingMode.PRODUCTION
        assert status["log_files"]["main"] is None
        assert status["log_files"]["json"] is None
        assert status["log_files"]["errors"] is None
