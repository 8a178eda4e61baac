"""Logging configuration utilities."""

import logging
import sys
from datetime import datetime
from typing import TextIO

from teetimes.config.logging_filters import SensitiveDataFilter


class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True):
        """Initialize formatter.

        Args:
            use_color: Whether to wrap records in ANSI color codes
        """
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color.

        Args:
            record: Log record to format

        Returns:
            Colored string
        """
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]
        msg = record.getMessage()

        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        line = f"{timestamp} - {record.name} - {record.levelname} - {msg}"
        if not self.use_color:
            return line
        color = self.COLORS.get(record.levelname, self.RESET)
        return f"{color}{line}{self.RESET}"

def get_console_handler(stream: TextIO, level: int) -> logging.StreamHandler:
    """Create console handler.

    Args:
        stream: Stream to write to
        level: Minimum level for the handler

    Returns:
        Configured console handler
    """
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_color=stream.isatty()))
    console_handler.addFilter(SensitiveDataFilter())
    return console_handler

def setup_logging(verbose: bool = False, log_file: str | None = None, stream: TextIO | None = None) -> None:
    """Set up logging configuration.

    Console output goes to stderr so that stdout only carries tee time output.
    """
    level = logging.INFO if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if log_file else level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    root_logger.addHandler(get_console_handler(stream or sys.stderr, level))

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        file_handler.addFilter(SensitiveDataFilter())
        root_logger.addHandler(file_handler)

    # urllib3 is chatty at DEBUG and logs full URLs
    logging.getLogger('urllib3').setLevel(logging.WARNING)
