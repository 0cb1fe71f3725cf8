"""
Tests for the flexsum logger implementations.
"""

import logging

from flexsum.core.models.config import LoggingConfig
from flexsum.services.logging import (
    FlexsumLogger,
    NullLogger,
    get_default_logger,
    set_default_logger,
)


class TestFlexsumLogger:
    def test_respects_level(self, caplog):
        logger = FlexsumLogger(name="flexsum.test.level", level="info")

        with caplog.at_level(logging.DEBUG, logger="flexsum.test.level"):
            logger.set_level("info")
            logger.debug("hidden")
            logger.info("shown %s", 1)

        messages = [r.getMessage() for r in caplog.records if r.name == "flexsum.test.level"]
        assert messages == ["shown 1"]

    def test_console_handler_writes_to_stderr(self, capsys):
        logger = FlexsumLogger(name="flexsum.test.console", level="debug", console_enabled=True)
        logger.warning("disk %s", "full")

        err = capsys.readouterr().err
        assert "[WARNING] flexsum.test.console: disk full" in err

    def test_from_config(self):
        logger = FlexsumLogger.from_config(
            LoggingConfig(level="error"), name="flexsum.test.config"
        )
        assert logging.getLogger("flexsum.test.config").level == logging.ERROR
        assert isinstance(logger, FlexsumLogger)


class TestDefaultLogger:
    def test_null_by_default(self):
        assert isinstance(get_default_logger(), NullLogger)

    def test_installed_logger_is_returned(self):
        logger = FlexsumLogger(name="flexsum.test.default")
        set_default_logger(logger)
        assert get_default_logger() is logger

    def test_null_logger_accepts_calls(self):
        logger = NullLogger()
        logger.debug("x")
        logger.info("x")
        logger.warning("x")
        logger.error("x")
        logger.set_level("debug")
