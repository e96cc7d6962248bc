from __future__ import annotations

import pytest

from alertcns.core.rules import assess, registered_rules
from alertcns.core.rules.labs import acute_kidney_injury


def messages(assessment):
    return [flag.message for flag in assessment.flags]


def test_rules_evaluate_in_fixed_order():
    assert registered_rules() == [
        "adds_escalation",
        "respiratory_trend",
        "hypotension",
        "lactate",
        "kidney",
        "platelets",
        "albumin",
        "bilirubin",
        "crp",
        "wcc",
        "haemoglobin",
        "delirium_frailty",
        "frailty_score",
        "complex_device",
        "discharge_context",
        "delirium_hypotension",
        "manual_override",
    ]


def test_stable_patient_raises_no_flags(stable_patient):
    result = assess(stable_patient)
    assert result.flags == []
    assert result.score == 0
    assert result.category == "GREEN"


def test_empty_snapshot_is_green():
    result = assess({})
    assert result.flags == []
    assert result.score == 0


@pytest.mark.parametrize(
    "creatinine,baseline,fires",
    [
        ("40", "25", True),  # ratio 1.6
        ("40", "30", False),  # ratio 1.33, delta 10
        ("56", "30", True),  # delta 26, inclusive
        ("126", "100", True),  # ratio 1.26, delta 26
        ("125", "100", False),
        ("120", "", False),
        ("", "70", False),
    ],
)
def test_acute_kidney_injury_thresholds(stable_patient, creatinine, baseline, fires):
    stable_patient.update({"creatinine": creatinine, "creatinine_baseline": baseline})
    result = assess(stable_patient)
    aki = [flag for flag in result.flags if flag.message.startswith("Acute Kidney Injury")]
    assert bool(aki) is fires
    if fires:
        assert aki[0].severity == "RED"
        assert aki[0].topic == "kidney"
        assert result.score == 3


def test_acute_kidney_injury_helper_handles_zero_baseline():
    assert acute_kidney_injury(10.0, 0.0) is False
    assert acute_kidney_injury(30.0, 0.0) is True


def test_both_lactate_bands_are_red(stable_patient):
    stable_patient["lactate"] = "5"
    assert messages(assess(stable_patient)) == ["Very High Lactate (5 mmol/L)"]
    stable_patient["lactate"] = "3.2"
    result = assess(stable_patient)
    assert messages(result) == ["High Lactate (3.2 mmol/L)"]
    assert result.flags[0].severity == "RED"
    assert result.score == 3
    stable_patient["lactate"] = "2"
    assert assess(stable_patient).flags == []


def test_value_and_trend_flags_fire_independently(stable_patient):
    stable_patient.update({"lactate": "5", "lactate_trend": "worsening"})
    result = assess(stable_patient)
    assert messages(result) == ["Very High Lactate (5 mmol/L)", "Worsening Lactate Trend"]
    assert [flag.severity for flag in result.flags] == ["RED", "AMBER"]
    assert result.score == 5


@pytest.mark.parametrize(
    "changes,message,severity,score",
    [
        ({"platelets": "90"}, "Low Platelets (90 x10^9/L)", "RED", 3),
        ({"platelets_trend": "worsening"}, "Worsening Platelet Trend", "AMBER", 2),
        ({"albumin": "25"}, "Low Albumin (25 g/L)", "AMBER", 1),
        ({"albumin_trend": "worsening"}, "Worsening Albumin Trend", "AMBER", 1),
        ({"bilirubin": "60"}, "Very High Bilirubin (60 µmol/L)", "RED", 3),
        ({"bilirubin": "40"}, "High Bilirubin (40 µmol/L)", "AMBER", 1),
        ({"bilirubin_trend": "worsening"}, "Worsening Bilirubin Trend", "AMBER", 2),
        ({"crp": "150"}, "Very High CRP (150 mg/L)", "RED", 3),
        ({"crp": "60"}, "High CRP (60 mg/L)", "AMBER", 1),
        ({"crp_trend": "worsening"}, "Worsening CRP Trend", "AMBER", 2),
        ({"wcc": "1.5"}, "Critical WBC (1.5 x10^9/L)", "RED", 3),
        ({"wcc": "25"}, "Critical WBC (25 x10^9/L)", "RED", 3),
        ({"wcc": "3"}, "Abnormal WBC (3 x10^9/L)", "AMBER", 1),
        ({"wcc": "20"}, "Abnormal WBC (20 x10^9/L)", "AMBER", 1),
        ({"wcc_trend": "worsening"}, "Worsening WBC Trend", "AMBER", 2),
        ({"hb": "70"}, "Very Low Hb (70 g/L)", "RED", 3),
        ({"hb": "95"}, "Low Hb (95 g/L)", "AMBER", 1),
        ({"hb_trend": "worsening"}, "Worsening Hb Trend", "AMBER", 2),
        ({"creatinine_trend": "worsening"}, "Worsening Creatinine Trend", "AMBER", 2),
        ({"rr_trend": "worsening"}, "Worsening Respiratory Trend", "RED", 3),
        ({"frailty_score": "6"}, "Severe Frailty (CFS 6)", "RED", 3),
        ({"frailty_score": "4"}, "Moderate Frailty (CFS 4)", "AMBER", 2),
        ({"complex_device": True}, "Complex Device Present", "RED", 3),
        ({"after_hours": True}, "High-Risk Discharge Context", "AMBER", 1),
        ({"high_risk_ward": "yes"}, "High-Risk Discharge Context", "AMBER", 1),
    ],
)
def test_single_rule_flags(stable_patient, changes, message, severity, score):
    stable_patient.update(changes)
    result = assess(stable_patient)
    assert messages(result) == [message]
    assert result.flags[0].severity == severity
    assert result.score == score


def test_normal_white_cell_count_raises_nothing(stable_patient):
    for value in ("4", "8", "12"):
        stable_patient["wcc"] = value
        assert assess(stable_patient).flags == []


def test_frailty_below_four_raises_nothing(stable_patient):
    stable_patient["frailty_score"] = "3"
    assert assess(stable_patient).flags == []


def test_hypotension_flag_and_adds_contribution(stable_patient):
    stable_patient["sbp"] = "85"
    result = assess(stable_patient)
    assert messages(result) == ["Hypotension (SBP 85 mmHg)"]
    assert result.early_warning.computed_score == 1
    assert result.score == 3


def test_adds_escalation_uses_effective_score(stable_patient):
    stable_patient.update({"adds_override": True, "adds_override_score": "5"})
    result = assess(stable_patient)
    assert messages(result) == ["High ADDS Score (5)"]
    assert result.score == 3
    stable_patient["adds_override_score"] = "3"
    result = assess(stable_patient)
    assert messages(result) == ["Elevated ADDS Score (3)"]
    assert result.flags[0].severity == "AMBER"
    assert result.score == 1


@pytest.mark.parametrize(
    "delirium,frailty,fires",
    [
        ("yes", False, False),
        ("no", True, False),
        ("yes", True, True),
        ("2", True, True),
    ],
)
def test_delirium_frailty_rule_is_conjunctive(stable_patient, delirium, frailty, fires):
    stable_patient.update({"delirium": delirium, "frailty_impression": frailty})
    result = assess(stable_patient)
    assert ("Delirium with Frailty" in messages(result)) is fires


def test_delirium_with_hypotension_adds_to_hypotension(stable_patient):
    stable_patient.update({"delirium": "yes", "sbp": "85"})
    result = assess(stable_patient)
    assert messages(result) == ["Hypotension (SBP 85 mmHg)", "Delirium with Hypotension"]
    assert result.score == 6
    assert result.category == "RED"


def test_manual_override_weight_and_default_reason(stable_patient):
    stable_patient["manual_override"] = True
    result = assess(stable_patient)
    assert messages(result) == ["Clinical Concern Override: No reason given"]
    assert result.score == 6
    assert result.category == "RED"

    stable_patient["override_reason"] = "Family concerned, looks unwell"
    assert messages(assess(stable_patient)) == ["Clinical Concern Override: Family concerned, looks unwell"]


def test_red_flags_precede_amber_in_rule_order(stable_patient):
    stable_patient.update({"albumin": "25", "lactate": "5", "crp": "60", "hb": "70"})
    result = assess(stable_patient)
    assert messages(result) == [
        "Very High Lactate (5 mmol/L)",
        "Very Low Hb (70 g/L)",
        "Low Albumin (25 g/L)",
        "High CRP (60 mg/L)",
    ]
    assert result.score == 8
    assert len(result.red_flags) == 2
    assert len(result.amber_flags) == 2
