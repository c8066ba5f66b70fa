"""Unit tests for logging setup."""

import logging

from rich.logging import RichHandler

from pylot_content.log import LOGGER_NAME, configure_logging, stderr_console


class TestConfigureLogging:
    def test_handler_on_stderr(self) -> None:
        logger = configure_logging("DEBUG")
        handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert handlers[0].console is stderr_console
        assert stderr_console.stderr is True
        assert logger.propagate is False

    def test_idempotent(self) -> None:
        configure_logging("INFO")
        logger = configure_logging("WARNING")
        assert len([h for h in logger.handlers if isinstance(h, RichHandler)]) == 1
        assert logger.level == logging.WARNING

    def test_module_loggers_are_children(self) -> None:
        configure_logging()
        assert logging.getLogger("pylot_content.client").parent.name == LOGGER_NAME
