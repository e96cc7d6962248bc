"""Utilities for masking identifiers in free text."""

from __future__ import annotations

import re

__all__ = ["redact_identifiers"]


_URN_RE = re.compile(r"\b[A-Za-z]{0,3}\d{6,10}\b")


def redact_identifiers(value: str) -> str:
    """Mask hospital URNs (optionally prefixed by initials) in *value*."""

    return _URN_RE.sub("[REDACTED]", value)
