"""Vital-sign rules: ADDS escalation, respiratory trend and hypotension."""

from __future__ import annotations

from typing import List

from ...schemas.assessment import EarlyWarningResult
from ..normalizer.snapshot import ObservationSnapshot
from ..normalizer.units import format_value
from .registry import Finding, finding, register

HYPOTENSION_SBP = 90


def is_hypotensive(obs: ObservationSnapshot) -> bool:
    sbp = obs.number("sbp")
    return sbp is not None and sbp < HYPOTENSION_SBP


@register("adds_escalation")
def adds_escalation(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    value = adds.effective_score
    if value >= 5:
        return [finding("RED", f"High ADDS Score ({value})", 3)]
    if value >= 3:
        return [finding("AMBER", f"Elevated ADDS Score ({value})", 1)]
    return []


@register("respiratory_trend")
def respiratory_trend(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if obs.worsening("rr_trend"):
        return [finding("RED", "Worsening Respiratory Trend", 3)]
    return []


@register("hypotension")
def hypotension(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    if is_hypotensive(obs):
        return [finding("RED", f"Hypotension (SBP {format_value(obs.number('sbp'))} mmHg)", 3)]
    return []
