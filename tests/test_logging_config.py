"""Tests for logging configuration."""

from __future__ import annotations

import io
import logging

import pytest

from summary_generate.cli import main
from summary_generate.utils.logging_config import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.parametrize(("level", "expected"), [("debug", logging.DEBUG), ("ERROR", logging.ERROR)])
    def test_known_levels(self, level: str, expected: int) -> None:
        logger = configure_logging(level, stream=io.StringIO())
        assert logger.level == expected

    @pytest.mark.parametrize("level", ["basic_format", "getLogger", "verbose"])
    def test_unknown_names_fall_back_to_warning(self, level: str) -> None:
        """Module attributes that are not level names are rejected."""
        logger = configure_logging(level, stream=io.StringIO())
        assert logger.level == logging.WARNING

    def test_single_handler_on_repeat(self) -> None:
        configure_logging("INFO", stream=io.StringIO())
        logger = configure_logging("INFO", stream=io.StringIO())
        assert len(logger.handlers) == 1


class TestLogLevelOption:
    """Tests for the --log-level option."""

    def test_accepts_lowercase_level(self) -> None:
        assert main(["--log-level", "debug", "supports", "html"]) == 0
        assert logging.getLogger("summary_generate").level == logging.DEBUG

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "basic_format", "supports", "html"])
        assert exc_info.value.code == 2
