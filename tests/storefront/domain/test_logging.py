"""Tests for logging configuration."""

import logging

import pytest
from storefront.utils.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


class TestConfigureLogging:
    def test_console_only_by_default(self, restore_logging):
        configure_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_log_dir_adds_rotating_files(self, tmp_path, restore_logging):
        log_dir = tmp_path / "logs"
        configure_logging(level="INFO", log_dir=str(log_dir))

        get_logger("storefront.test").error("Something broke", order="A-1")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Something broke" in (log_dir / "storefront.log").read_text(encoding="utf-8")
        assert "Something broke" in (log_dir / "storefront_error.log").read_text(encoding="utf-8")
