"""Field vocabulary of the step-down review form."""

from __future__ import annotations

from typing import Tuple

__all__ = [
    "TREND_VALUES",
    "VITAL_FIELDS",
    "VITAL_TREND_FIELDS",
    "LAB_FIELDS",
    "LAB_TREND_FIELDS",
    "CONTEXT_FIELDS",
    "OVERRIDE_FIELDS",
    "SUMMARY_FIELDS",
    "HANDOFF_FIELDS",
    "ALL_FIELDS",
]

TREND_VALUES: Tuple[str, ...] = ("improving", "stable", "worsening")

VITAL_FIELDS: Tuple[str, ...] = (
    "rr",
    "spo2",
    "resp_device",
    "o2_flow",
    "fio2",
    "hr",
    "sbp",
    "dbp",
    "temp",
    "neuro_consciousness",
)

VITAL_TREND_FIELDS: Tuple[str, ...] = ("rr_trend", "spo2_trend", "hr_trend", "sbp_trend", "temp_trend")

LAB_FIELDS: Tuple[str, ...] = (
    "lactate",
    "creatinine",
    "creatinine_baseline",
    "platelets",
    "albumin",
    "bilirubin",
    "crp",
    "wcc",
    "hb",
)

LAB_TREND_FIELDS: Tuple[str, ...] = tuple(
    f"{name}_trend" for name in LAB_FIELDS if name != "creatinine_baseline"
)

CONTEXT_FIELDS: Tuple[str, ...] = (
    "delirium",
    "frailty_impression",
    "frailty_score",
    "complex_device",
    "after_hours",
    "high_risk_ward",
)

OVERRIDE_FIELDS: Tuple[str, ...] = (
    "manual_override",
    "override_reason",
    "adds_override",
    "adds_override_score",
)

SUMMARY_FIELDS: Tuple[str, ...] = (
    "review_type",
    "location",
    "room_number",
    "patient_id",
    "age",
    "weight",
    "icu_los",
    "stepdown_date",
    "admission_type",
    "reason_icu",
    "icu_summary",
    "pmh",
    "severe_comorbidities",
    "airway",
    "cap_refill",
    "urine_output_hr",
    "pain_score",
    "diet",
    "clinical_impression",
    "clinical_plan",
    "pivc_1_present",
    "pivc_1_commencement_date",
    "pivc_1_site_health",
    "cvad_present",
    "cvad_type",
    "cvad_commencement_date",
    "cvad_site_health",
    "idc_present",
    "idc_commencement_date",
)

# Subset carried between devices in a handoff key
HANDOFF_FIELDS: Tuple[str, ...] = (
    "review_type",
    "location",
    "room_number",
    "patient_id",
    "stepdown_date",
    "weight",
    "age",
    "admission_type",
    "icu_los",
    "after_hours",
    "reason_icu",
    "icu_summary",
    "pmh",
    "severe_comorbidities",
    "creatinine",
    "creatinine_baseline",
    "creatinine_trend",
    "lactate",
    "lactate_trend",
    "platelets",
    "platelets_trend",
    "hb",
    "hb_trend",
    "fio2",
)

ALL_FIELDS: Tuple[str, ...] = (
    VITAL_FIELDS
    + VITAL_TREND_FIELDS
    + LAB_FIELDS
    + LAB_TREND_FIELDS
    + CONTEXT_FIELDS
    + OVERRIDE_FIELDS
    + SUMMARY_FIELDS
)
