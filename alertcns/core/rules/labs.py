"""Laboratory rules: tiered absolute thresholds plus independent trend checks."""

from __future__ import annotations

from typing import List, Optional

from ...schemas.assessment import EarlyWarningResult, Topic
from ..normalizer.snapshot import ObservationSnapshot
from ..normalizer.units import format_value
from .registry import Finding, finding, register

AKI_RELATIVE_RISE = 1.5
AKI_ABSOLUTE_RISE = 26.0


def _trend(
    obs: ObservationSnapshot,
    key: str,
    label: str,
    weight: int,
    topic: Optional[Topic] = None,
) -> List[Finding]:
    if obs.worsening(f"{key}_trend"):
        return [finding("AMBER", f"Worsening {label} Trend", weight, topic)]
    return []


def acute_kidney_injury(creatinine: Optional[float], baseline: Optional[float]) -> bool:
    """Creatinine rise of at least 50% or 26 umol/L over baseline."""

    if creatinine is None or baseline is None:
        return False
    if baseline > 0 and creatinine >= AKI_RELATIVE_RISE * baseline:
        return True
    return creatinine - baseline >= AKI_ABSOLUTE_RISE


@register("lactate")
def lactate(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("lactate")
    if value is not None and value > 4:
        found.append(finding("RED", f"Very High Lactate ({format_value(value)} mmol/L)", 3, "lactate"))
    elif value is not None and value > 2:
        found.append(finding("RED", f"High Lactate ({format_value(value)} mmol/L)", 3, "lactate"))
    return found + _trend(obs, "lactate", "Lactate", 2, "lactate")


@register("kidney")
def kidney(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    creatinine = obs.number("creatinine")
    baseline = obs.number("creatinine_baseline")
    if acute_kidney_injury(creatinine, baseline):
        found.append(
            finding(
                "RED",
                f"Acute Kidney Injury (Creatinine {format_value(creatinine)} vs baseline "
                f"{format_value(baseline)} µmol/L)",
                3,
                "kidney",
            )
        )
    return found + _trend(obs, "creatinine", "Creatinine", 2, "kidney")


@register("platelets")
def platelets(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("platelets")
    if value is not None and value < 100:
        found.append(finding("RED", f"Low Platelets ({format_value(value)} x10^9/L)", 3))
    return found + _trend(obs, "platelets", "Platelet", 2)


@register("albumin")
def albumin(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("albumin")
    if value is not None and value < 30:
        found.append(finding("AMBER", f"Low Albumin ({format_value(value)} g/L)", 1))
    return found + _trend(obs, "albumin", "Albumin", 1)


@register("bilirubin")
def bilirubin(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("bilirubin")
    if value is not None and value > 50:
        found.append(finding("RED", f"Very High Bilirubin ({format_value(value)} µmol/L)", 3, "liver"))
    elif value is not None and value > 34:
        found.append(finding("AMBER", f"High Bilirubin ({format_value(value)} µmol/L)", 1, "liver"))
    return found + _trend(obs, "bilirubin", "Bilirubin", 2, "liver")


@register("crp")
def crp(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("crp")
    if value is not None and value > 100:
        found.append(finding("RED", f"Very High CRP ({format_value(value)} mg/L)", 3, "sepsis"))
    elif value is not None and value > 50:
        found.append(finding("AMBER", f"High CRP ({format_value(value)} mg/L)", 1, "sepsis"))
    return found + _trend(obs, "crp", "CRP", 2, "sepsis")


@register("wcc")
def wcc(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("wcc")
    if value is not None and not 2 <= value <= 20:
        found.append(finding("RED", f"Critical WBC ({format_value(value)} x10^9/L)", 3, "sepsis"))
    elif value is not None and not 4 <= value <= 12:
        found.append(finding("AMBER", f"Abnormal WBC ({format_value(value)} x10^9/L)", 1, "sepsis"))
    return found + _trend(obs, "wcc", "WBC", 2, "sepsis")


@register("haemoglobin")
def haemoglobin(obs: ObservationSnapshot, adds: EarlyWarningResult) -> List[Finding]:
    found: List[Finding] = []
    value = obs.number("hb")
    if value is not None and value < 80:
        found.append(finding("RED", f"Very Low Hb ({format_value(value)} g/L)", 3))
    elif value is not None and value < 100:
        found.append(finding("AMBER", f"Low Hb ({format_value(value)} g/L)", 1))
    return found + _trend(obs, "hb", "Hb", 2)
