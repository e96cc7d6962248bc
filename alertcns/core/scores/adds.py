"""ADDS early-warning sub-score with clinician override support."""

from __future__ import annotations

from typing import List, Mapping, Optional

from ...content import load_stepdown_pack
from ...schemas.assessment import EarlyWarningResult
from ...schemas.pack import AddsConfig, Band
from ..config import get_settings
from ..normalizer.snapshot import ObservationSnapshot
from ..normalizer.units import format_value

__all__ = ["band_score", "compute_early_warning"]


def _match_band(value: float, bands: List[Band]) -> Band:
    for band in bands:
        if band.max is None or value <= band.max:
            return band
    return bands[-1]  # pragma: no cover - pack validation guarantees an open band


def band_score(value: float, bands: List[Band]) -> int:
    """Return the score of the band *value* falls into."""

    return _match_band(value, bands).score


def _default_config() -> AddsConfig:
    return load_stepdown_pack(get_settings().content_pack).adds


def compute_early_warning(
    snapshot: Mapping[str, object],
    config: Optional[AddsConfig] = None,
) -> EarlyWarningResult:
    """Compute the ADDS score for *snapshot*.

    Absent channels contribute nothing. The manual override replaces the
    effective score only; the computed score is always reported.
    """

    obs = snapshot if isinstance(snapshot, ObservationSnapshot) else ObservationSnapshot(snapshot)
    config = config or _default_config()

    score = 0
    reasons: List[str] = []
    met_reason = ""

    for key, channel in config.channels.items():
        value = obs.number(key)
        if value is None:
            continue
        band = _match_band(value, channel.bands)
        score += band.score
        if band.score > 0:
            reasons.append(f"{channel.label} abnormal ({format_value(value)})")
        if band.met and not met_reason:
            met_reason = f"{channel.label} {band.note or 'MET'}"
        if obs.worsening(f"{key}_trend"):
            reasons.append(f"Worsening {channel.label} trend")

    consciousness = obs.text("neuro_consciousness")
    rule = config.consciousness
    if consciousness and consciousness != rule.alert_value:
        score += rule.penalty
        reasons.append(f"Consciousness: {consciousness}")
        if consciousness in rule.met_values and not met_reason:
            met_reason = consciousness

    support = config.respiratory_support
    device = obs.text("resp_device")
    if device and device != support.room_air:
        score += support.penalty
        reasons.append(f"On respiratory support ({device})")
        spo2 = obs.number("spo2")
        if spo2 is not None and spo2 < support.low_spo2_below:
            score += support.low_spo2_penalty
            reasons.append(f"SpO2 below {format_value(support.low_spo2_below)} on support")

    effective = score
    overridden = False
    manual = obs.number("adds_override_score")
    if obs.flag("adds_override") and manual is not None:
        effective = max(0, int(manual))
        overridden = True

    return EarlyWarningResult(
        computed_score=score,
        effective_score=effective,
        overridden=overridden,
        met_call=bool(met_reason),
        met_reason=met_reason,
        reasons=reasons,
    )
