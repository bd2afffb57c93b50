# File: tests/test_logger.py
import logging

from greetfetch.logger import LOGGER_NAME, init_logging


def test_init_logging_adds_file_handler(tmp_path):
    log_file = tmp_path / "greetfetch.log"
    lg = init_logging(level="DEBUG", log_file=log_file)
    try:
        lg.debug("hello %s", "file")
        for handler in lg.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")
        assert lg.propagate is False
        assert lg is logging.getLogger(LOGGER_NAME)
    finally:
        init_logging()


def test_init_logging_replaces_previous_handlers(tmp_path):
    init_logging(level="INFO", log_file=tmp_path / "a.log")
    lg = init_logging()
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING
