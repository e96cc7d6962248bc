"""Context, frailty, interaction and manual-override rules."""

from __future__ import annotations

from typing import List

from ...schemas.assessment import EarlyWarningResult
from ..normalizer.snapshot import ObservationSnapshot
from ..normalizer.units import format_value
from .registry import Finding, finding, register
from .vitals import is_hypotensive

OVERRIDE_WEIGHT = 6
DEFAULT_OVERRIDE_REASON = "No reason given"


def delirium_present(obs: ObservationSnapshot) -> bool:
    # "yes"/checkbox, or the graded select (0 none, 1 mild, 2 mod-severe)
    if obs.flag("delirium"):
        return True
    grade = obs.number("delirium")
    return grade is not None and grade >= 1


@register("delirium_frailty")
def delirium_frailty(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if delirium_present(obs) and obs.flag("frailty_impression"):
        return [finding("RED", "Delirium with Frailty", 3)]
    return []


@register("frailty_score")
def frailty_score(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    cfs = obs.number("frailty_score")
    if cfs is not None and cfs > 5:
        return [finding("RED", f"Severe Frailty (CFS {format_value(cfs)})", 3)]
    if cfs is not None and cfs >= 4:
        return [finding("AMBER", f"Moderate Frailty (CFS {format_value(cfs)})", 2)]
    return []


@register("complex_device")
def complex_device(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if obs.flag("complex_device"):
        return [finding("RED", "Complex Device Present", 3)]
    return []


@register("discharge_context")
def discharge_context(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if obs.flag("after_hours") or obs.flag("high_risk_ward"):
        return [finding("AMBER", "High-Risk Discharge Context", 1)]
    return []


@register("delirium_hypotension")
def delirium_hypotension(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if delirium_present(obs) and is_hypotensive(obs):
        return [finding("RED", "Delirium with Hypotension", 3)]
    return []


@register("manual_override")
def manual_override(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if not obs.flag("manual_override"):
        return []
    reason = obs.text("override_reason", DEFAULT_OVERRIDE_REASON)
    return [finding("RED", f"Clinical Concern Override: {reason}", OVERRIDE_WEIGHT)]
