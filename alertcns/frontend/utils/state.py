"""Session state helpers for Streamlit."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

from ...core.normalizer.snapshot import ObservationSnapshot

TREND_OPTIONS: Tuple[str, ...] = ("improving", "stable", "worsening")

SELECT_OPTIONS: Dict[str, Tuple[str, ...]] = {
    "review_type": ("post", "pre"),
    "admission_type": ("Elective Surgical", "Emergency Surgical", "Medical/ED"),
    "resp_device": ("RA", "NP", "HFNP", "NIV"),
    "neuro_consciousness": ("Alert", "Voice", "Pain", "Unresponsive"),
    "airway": ("Patent", "At Risk", "Tracheostomy", "Laryngectomy"),
    "cap_refill": ("<3s", ">3s"),
    "delirium": ("no", "yes"),
    "diet": ("Tolerating Full Diet", "Tolerating Light Diet", "Clear fluids", "NBM", "Other"),
    "pivc_1_site_health": ("Clean & Healthy", "Redness/Swelling", "Signs of Infection", "Occluded/Poor Function"),
    "cvad_type": ("CVC", "PICC", "Vascath"),
    "cvad_site_health": ("Clean & Healthy", "Redness/Swelling", "Signs of Infection", "Occluded/Poor Function"),
}

CHECKBOX_FIELDS: Tuple[str, ...] = (
    "frailty_impression",
    "complex_device",
    "after_hours",
    "high_risk_ward",
    "manual_override",
    "adds_override",
    "pivc_1_present",
    "cvad_present",
    "idc_present",
)

_FLAG_TRUE = {"1", "true", "yes", "on", "y"}


@dataclass
class ReviewState:
    handoff_key: Optional[str] = None
    messages: List[str] = field(default_factory=list)


def get_state(session_state) -> ReviewState:
    if "review_state" not in session_state:
        session_state.review_state = ReviewState()
    return session_state.review_state


def options_for(field_id: str) -> Tuple[str, ...]:
    if field_id.endswith("_trend"):
        return TREND_OPTIONS
    return SELECT_OPTIONS.get(field_id, ())


def coerce_for_widget(field_id: str, value: Any) -> Tuple[bool, Any]:
    """Return ``(ok, value)`` shaped for the widget bound to *field_id*.

    Select widgets reject values outside their options, so those are skipped.
    """

    if field_id in CHECKBOX_FIELDS:
        if isinstance(value, bool):
            return True, value
        return True, str(value).strip().lower() in _FLAG_TRUE
    options = options_for(field_id)
    if options:
        text = "" if value is None else str(value)
        return (text in options), text
    if value is None or isinstance(value, bool):
        return True, ""
    return True, str(value)


def load_into_widgets(
    session_state: MutableMapping[str, Any],
    snapshot: Mapping[str, Any],
    *,
    overwrite: bool = False,
) -> List[str]:
    """Copy snapshot values into widget keys; return the fields that were skipped."""

    skipped = []
    for field_id, value in snapshot.items():
        ok, coerced = coerce_for_widget(field_id, value)
        if not ok:
            skipped.append(field_id)
            continue
        if overwrite or field_id not in session_state:
            session_state[field_id] = coerced
    return skipped


def gather_snapshot(session_state: Mapping[str, Any], field_ids) -> ObservationSnapshot:
    return ObservationSnapshot({key: session_state[key] for key in field_ids if key in session_state})


def reset_widgets(session_state: MutableMapping[str, Any], field_ids) -> None:
    for key in field_ids:
        if key in session_state:
            del session_state[key]
