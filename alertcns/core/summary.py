"""DMR summary text generated from a snapshot and its assessment."""

from __future__ import annotations

from datetime import date
from typing import List, Mapping, Optional, Tuple

from .normalizer.snapshot import ObservationSnapshot
from .normalizer.units import format_value
from .orchestrator import evaluate
from .plan import category_label
from .rules.context import delirium_present

__all__ = ["bloods_summary", "devices_summary", "dwell_days", "generate_summary", "urine_output_summary"]

_NA = "N/A"

_BLOODS: Tuple[Tuple[str, str], ...] = (
    ("creatinine", "Cr"),
    ("lactate", "Lac"),
    ("hb", "Hb"),
    ("platelets", "Plt"),
    ("albumin", "Alb"),
    ("bilirubin", "Bili"),
    ("crp", "CRP"),
    ("wcc", "WBC"),
)

_ARROWS = {"improving": "↑", "stable": "→", "worsening": "↓"}


def urine_output_summary(obs: ObservationSnapshot) -> str:
    weight = obs.number("weight")
    per_hour = obs.number("urine_output_hr")
    if per_hour is None:
        return _NA
    if weight is not None and weight > 0:
        return f"{format_value(per_hour)} mL/hr ({per_hour / weight:.2f} mL/kg/hr)"
    return f"{format_value(per_hour)} mL/hr"


def bloods_summary(obs: ObservationSnapshot) -> str:
    parts = []
    for key, name in _BLOODS:
        value = obs.text(key, "--")
        trend = obs.trend(f"{key}_trend")
        parts.append(f"{name} {value}({_ARROWS[trend]})" if trend else f"{name} {value}")
    return ", ".join(parts)


def dwell_days(obs: ObservationSnapshot, device: str, today: Optional[date] = None) -> Optional[int]:
    """Whole days since *device* was inserted, from its ``*_commencement_date``."""

    started = obs.iso_date(f"{device}_commencement_date")
    if started is None:
        return None
    return abs(((today or date.today()) - started).days)


def _dwell_suffix(days: Optional[int]) -> str:
    return f" (Dwell {days}d)" if days is not None else ""


def devices_summary(obs: ObservationSnapshot, today: Optional[date] = None) -> List[str]:
    devices = []
    if obs.flag("pivc_1_present"):
        days = dwell_days(obs, "pivc_1", today)
        dwell = f"{days}d" if days is not None else _NA
        devices.append(f"PIVC1: {obs.text('pivc_1_site_health', _NA)} (Dwell {dwell})")
    if obs.flag("cvad_present"):
        cvad = f"CVAD: {obs.text('cvad_type', _NA)} {obs.text('cvad_site_health')}".rstrip()
        devices.append(cvad + _dwell_suffix(dwell_days(obs, "cvad", today)))
    if obs.flag("idc_present"):
        devices.append("IDC present" + _dwell_suffix(dwell_days(obs, "idc", today)))
    if obs.flag("complex_device"):
        devices.append("Complex device present")
    return devices or ["None"]


def _adds_line(effective: int, computed: int, overridden: bool) -> str:
    if overridden:
        return f"ADDS: {effective} (manual override; calculated {computed})"
    return f"ADDS: {effective}"


def generate_summary(snapshot: Mapping[str, object], today: Optional[date] = None) -> str:
    obs = snapshot if isinstance(snapshot, ObservationSnapshot) else ObservationSnapshot(snapshot)
    result = evaluate(obs)
    adds = result.early_warning
    red = [flag.message for flag in result.flags if flag.severity == "RED"]
    amber = [flag.message for flag in result.flags if flag.severity == "AMBER"]
    devices = "\n- ".join(devices_summary(obs, today))
    plan = obs.text("clinical_plan") or result.plan
    met_line = f"\nMET CALL CRITERIA: {adds.met_reason}" if adds.met_call else ""

    summary = f"""
ALERT CNS {obs.text('review_type', 'post')} review on ward {obs.text('location')}
LOS: {obs.text('icu_los', _NA)} days
{category_label(result.category)} (score {result.score})

Patient ID: {obs.text('patient_id', _NA)} | Age: {obs.text('age', _NA)}

REASON FOR ICU: {obs.text('reason_icu', _NA)}

ICU SUMMARY: {obs.text('icu_summary', _NA)}

A: Airway: {obs.text('airway', _NA)}
B: RR {obs.text('rr', _NA)}, SpO2 {obs.text('spo2', _NA)} on {obs.text('resp_device', _NA)} (FiO2 {obs.text('fio2', _NA)}%)
C: HR {obs.text('hr', _NA)}, BP {obs.text('sbp', _NA)}/{obs.text('dbp', _NA)}, CRT {obs.text('cap_refill', _NA)}, UO: {urine_output_summary(obs)}
D: Consciousness: {obs.text('neuro_consciousness', _NA)}, Delirium: {'Yes' if delirium_present(obs) else 'No'}, Pain: {obs.text('pain_score', _NA)}/10
E: Temp {obs.text('temp', _NA)}°C, Diet: {obs.text('diet', _NA)}
{_adds_line(adds.effective_score, adds.computed_score, adds.overridden)}{met_line}

DEVICES:
- {devices}

BLOODS:
{bloods_summary(obs)}

Flags:
- Red: {'; '.join(red) if red else 'None'}
- Amber: {'; '.join(amber) if amber else 'None'}
- After-hours: {'Yes' if obs.flag('after_hours') else 'No'}

IMP:
{obs.text('clinical_impression')}

Plan:
{plan}
"""
    return summary.strip()
