"""Tests for logging configuration."""

import io
import logging

import pytest

from teetimes.config.logging import ColoredFormatter, setup_logging
from teetimes.config.logging_filters import SensitiveDataFilter


@pytest.fixture
def restore_root_logger():
    """Put back the root logger handlers pytest installed."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

def make_record(msg, args=None):
    return logging.LogRecord("teetimes", logging.INFO, __file__, 1, msg, args, None)

def test_filter_masks_form_password():
    record = make_record("Posting _name=jansen&_ww=geheim to login")

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == "Posting _name=jansen&_ww=***MASKED*** to login"

def test_filter_masks_formatted_arguments():
    """Test values passed as arguments are masked too."""
    record = make_record("Body: %s", ("_name=jansen&_ww=geheim",))

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == "Body: _name=jansen&_ww=***MASKED***"

def test_filter_masks_query_fields():
    record = make_record("Request: https://example.test/login.asp?passwd=Z2VoZWlt&password=geheim&login=jansen")

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == (
        "Request: https://example.test/login.asp?passwd=***MASKED***&password=***MASKED***&login=jansen"
    )

def test_filter_leaves_other_messages():
    record = make_record("Schedule page: https://example.test/teetimes.asp?sid=1&q=2")

    SensitiveDataFilter().filter(record)

    assert record.getMessage() == "Schedule page: https://example.test/teetimes.asp?sid=1&q=2"

def test_colored_formatter_without_color():
    line = ColoredFormatter(use_color=False).format(make_record("hello"))

    assert line.endswith(" - teetimes - INFO - hello")
    assert "\033[" not in line

@pytest.mark.parametrize("verbose,shown", [(False, False), (True, True)])
def test_setup_logging_verbosity(restore_root_logger, verbose, shown):
    """Test info messages only reach the console when verbose."""
    stream = io.StringIO()

    setup_logging(verbose=verbose, stream=stream)
    logging.getLogger("teetimes.test").info("Schedule page: https://example.test/")
    logging.getLogger("teetimes.test").warning("Cached session unreadable")

    assert ("Schedule page" in stream.getvalue()) is shown
    assert "Cached session unreadable" in stream.getvalue()

def test_setup_logging_file(restore_root_logger, tmp_path):
    """Test the log file receives masked debug messages."""
    log_file = tmp_path / "teetimes.log"

    setup_logging(log_file=str(log_file), stream=io.StringIO())
    logging.getLogger("teetimes.test").debug("Posting _name=jansen&_ww=geheim")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert "_ww=***MASKED***" in content
    assert "geheim" not in content
