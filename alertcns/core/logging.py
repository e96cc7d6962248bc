"""Logging helpers for the ALERT step-down tool."""
from __future__ import annotations

import logging

from .config import get_settings
from .normalizer.text import redact_identifiers

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class PHIRedactor(logging.Filter):
    """Filter that redacts patient identifiers (URNs) from log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if isinstance(record.msg, str):
            record.msg = redact_identifiers(record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    key: redact_identifiers(value) if isinstance(value, str) else value
                    for key, value in record.args.items()
                }
            else:
                record.args = tuple(
                    redact_identifiers(arg) if isinstance(arg, str) else arg for arg in record.args
                )
        return True


def setup_logging(level: int | None = None) -> None:
    """Configure global logging handlers."""

    settings = get_settings()
    logging.basicConfig(
        level=level if level is not None else settings.log_level_value,
        format=_FORMAT,
    )
    if settings.redact_logs:
        for handler in logging.getLogger().handlers:
            if not any(isinstance(f, PHIRedactor) for f in handler.filters):
                handler.addFilter(PHIRedactor())
