from __future__ import annotations

from typing import Dict

import pytest

from alertcns.content import load_stepdown_pack

STABLE_PATIENT: Dict[str, object] = {
    "rr": "22",
    "spo2": "95",
    "resp_device": "RA",
    "hr": "88",
    "sbp": "110",
    "neuro_consciousness": "Alert",
    "temp": "37.0",
    "rr_trend": "stable",
    "lactate": "1.1",
    "lactate_trend": "stable",
    "creatinine": "80",
    "creatinine_baseline": "75",
    "creatinine_trend": "stable",
    "platelets": "250",
    "platelets_trend": "stable",
    "albumin": "35",
    "albumin_trend": "stable",
    "bilirubin": "12",
    "bilirubin_trend": "stable",
    "crp": "5",
    "crp_trend": "stable",
    "wcc": "8",
    "wcc_trend": "stable",
    "hb": "130",
    "hb_trend": "stable",
    "delirium": "no",
    "frailty_impression": False,
    "frailty_score": "2",
    "complex_device": False,
    "after_hours": False,
    "high_risk_ward": False,
    "manual_override": False,
    "override_reason": "",
    "adds_override": False,
    "adds_override_score": "",
}


@pytest.fixture
def stable_patient() -> Dict[str, object]:
    return dict(STABLE_PATIENT)


@pytest.fixture
def pack():
    return load_stepdown_pack("stepdown")
