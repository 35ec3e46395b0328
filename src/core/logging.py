"""Console logging for the application and CLI."""

import logging
import re
import sys
from typing import Optional

from src.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Mask password and secret values in log messages."""

    SENSITIVE_PATTERNS = [
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)[^"\'\s&,}]+', re.IGNORECASE), r"\1***"),
        (re.compile(r'(secret[_-]?key["\']?\s*[:=]\s*["\']?)[^"\'\s&,}]+', re.IGNORECASE), r"\1***"),
    ]

    def _mask(self, text: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)

        if isinstance(record.args, tuple):
            record.args = tuple(
                self._mask(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        elif isinstance(record.args, dict):
            record.args = {
                key: self._mask(value) if isinstance(value, str) else value
                for key, value in record.args.items()
            }
        return True


def setup_logging(level: Optional[str] = None) -> None:
    """Attach a single console handler to the root logger. Safe to call twice."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())

    for handler in root.handlers:
        if getattr(handler, "_blog_admin", False):
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(SensitiveDataFilter())
    handler._blog_admin = True  # type: ignore[attr-defined]
    root.addHandler(handler)
