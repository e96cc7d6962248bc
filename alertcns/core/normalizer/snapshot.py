"""Read-only accessor over the flat observation mapping supplied by the form."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Dict, Iterator

from ..fields import TREND_VALUES
from .units import to_date, to_float

__all__ = ["ObservationSnapshot", "Value"]

Value = str | bool | int | float | None

_FLAG_TRUE = {"1", "true", "yes", "on", "y"}


class ObservationSnapshot(Mapping):
    """Immutable, string-keyed mapping of raw form values.

    Typed readers never raise: missing or unparsable values read as absent.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Dict[str, Value] = dict(data or {})

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ObservationSnapshot({self._data!r})"

    def number(self, key: str) -> float | None:
        return to_float(self._data.get(key))

    def iso_date(self, key: str) -> date | None:
        return to_date(self._data.get(key))

    def flag(self, key: str) -> bool:
        value = self._data.get(key)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.strip().lower() in _FLAG_TRUE
        return False

    def text(self, key: str, default: str = "") -> str:
        value = self._data.get(key)
        if value is None or isinstance(value, bool):
            return default
        value = str(value).strip()
        return value or default

    def trend(self, key: str) -> str:
        value = self.text(key).lower()
        return value if value in TREND_VALUES else ""

    def worsening(self, key: str) -> bool:
        return self.trend(key) == "worsening"

    def with_updates(self, updates: Mapping[str, Any]) -> "ObservationSnapshot":
        merged = dict(self._data)
        merged.update(updates)
        return ObservationSnapshot(merged)

    def to_dict(self) -> Dict[str, Value]:
        return dict(self._data)
