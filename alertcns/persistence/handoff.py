"""Portable handoff key: base64-encoded JSON of a snapshot subset."""

from __future__ import annotations

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping

from ..core.fields import ALL_FIELDS, HANDOFF_FIELDS
from ..core.normalizer.snapshot import ObservationSnapshot

__all__ = ["HandoffKeyError", "apply_handoff", "decode_handoff", "encode_handoff"]

logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = "Invalid handoff key."


@dataclass(eq=False)
class HandoffKeyError(Exception):
    message: str = INVALID_KEY_MESSAGE

    def __str__(self) -> str:
        return self.message


def encode_handoff(snapshot: Mapping[str, Any], fields: Iterable[str] = HANDOFF_FIELDS) -> str:
    """Encode the *fields* present in *snapshot* as a handoff key."""

    subset = {key: snapshot[key] for key in fields if key in snapshot}
    payload = json.dumps(subset, ensure_ascii=True, separators=(",", ":"))
    return base64.b64encode(payload.encode("ascii")).decode("ascii")


def decode_handoff(token: str, fields: Iterable[str] = ALL_FIELDS) -> Dict[str, Any]:
    """Decode a handoff key, raising :class:`HandoffKeyError` when malformed.

    Only keys naming a form field in *fields* are returned; anything else in
    the payload is dropped.
    """

    if not isinstance(token, str) or not token.strip():
        raise HandoffKeyError()
    try:
        raw = base64.b64decode(token.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (ValueError, RecursionError) as exc:  # binascii.Error, UnicodeDecodeError, JSONDecodeError
        logger.warning("Rejected handoff key: %s", exc.__class__.__name__)
        raise HandoffKeyError() from exc
    if not isinstance(data, dict):
        logger.warning("Rejected handoff key: payload is %s, not an object", type(data).__name__)
        raise HandoffKeyError()
    allowed = set(fields)
    ignored = [key for key in data if key not in allowed]
    if ignored:
        logger.warning("Ignoring %d unknown handoff field(s)", len(ignored))
    data = {key: value for key, value in data.items() if key in allowed}
    for value in data.values():
        if value is not None and not isinstance(value, (str, bool, int, float)):
            raise HandoffKeyError()
    return data


def apply_handoff(snapshot: Mapping[str, Any], token: str) -> ObservationSnapshot:
    """Return *snapshot* updated with the decoded key; the input is never mutated."""

    data = decode_handoff(token)
    base = snapshot if isinstance(snapshot, ObservationSnapshot) else ObservationSnapshot(snapshot)
    return base.with_updates(data)
