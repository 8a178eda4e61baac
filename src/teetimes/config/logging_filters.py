"""Logging filters and utilities."""

import logging
import re


class SensitiveDataFilter(logging.Filter):
    """Filter to mask credentials in log records."""

    MASK = '***MASKED***'

    # Matches form-encoded credential fields such as "_ww=secret"
    FORM_FIELD_PATTERN = re.compile(r'(?P<key>(?:^|[?&])(?:_ww|passwd|password)=)[^&\s]*')

    def mask_text(self, text: str) -> str:
        """Mask credential values in form-encoded text."""
        return self.FORM_FIELD_PATTERN.sub(lambda m: f"{m.group('key')}{self.MASK}", text)

    def filter(self, record: logging.LogRecord) -> bool:
        """Mask sensitive data in log record."""
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if isinstance(record.msg, str):
            record.msg = self.mask_text(record.msg)
        return True
