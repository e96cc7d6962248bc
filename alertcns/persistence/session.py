"""Session-scoped storage of the in-progress review."""

from __future__ import annotations

import json
import logging
from typing import Any, MutableMapping, Optional

from ..core.config import get_settings
from ..core.normalizer.snapshot import ObservationSnapshot

__all__ = ["SessionStore"]

logger = logging.getLogger(__name__)


class SessionStore:
    """Store the full snapshot as JSON under one key of a session mapping.

    *storage* is ``st.session_state`` in the app and a plain dict in tests.
    """

    def __init__(self, storage: MutableMapping[str, Any], key: Optional[str] = None) -> None:
        self.storage = storage
        self.key = key or get_settings().session_key

    def load_or_default(self) -> ObservationSnapshot:
        raw = self.storage.get(self.key)
        if not raw:
            return ObservationSnapshot()
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            logger.warning("Discarding unreadable session state under %s", self.key)
            return ObservationSnapshot()
        if not isinstance(data, dict):
            logger.warning("Discarding non-object session state under %s", self.key)
            return ObservationSnapshot()
        return ObservationSnapshot(data)

    def save(self, snapshot: ObservationSnapshot) -> None:
        self.storage[self.key] = json.dumps(snapshot.to_dict(), ensure_ascii=False)

    def clear(self) -> None:
        self.storage.pop(self.key, None)
