from __future__ import annotations

import json
from pathlib import Path

import pytest

from alertcns.core.normalizer.snapshot import ObservationSnapshot
from alertcns.core.orchestrator import evaluate

GOLD_PATH = Path(__file__).resolve().parent / "gold" / "scenarios.json"


def test_stable_patient_end_to_end(stable_patient, pack):
    output = evaluate(stable_patient)
    assert output.early_warning.computed_score == 0
    assert output.flags == []
    assert output.score == 0
    assert output.category == "GREEN"
    assert output.plan == pack.plans.green


def test_very_high_lactate_alone_is_amber(stable_patient, pack):
    stable_patient["lactate"] = "5"
    output = evaluate(stable_patient)
    assert [(f.severity, f.message) for f in output.flags] == [("RED", "Very High Lactate (5 mmol/L)")]
    assert output.score == 3
    assert output.category == "AMBER"
    assert output.plan == pack.plans.amber


@pytest.mark.parametrize(
    "snapshot",
    [
        {},
        {"rr": "14", "spo2": "99", "hr": "70", "sbp": "125", "temp": "36.8", "neuro_consciousness": "Alert"},
        {"lactate": "", "crp": "abc", "frailty_score": "1"},
    ],
)
def test_manual_override_always_forces_red(snapshot):
    snapshot = dict(snapshot, manual_override=True, override_reason="Clinical concern")
    assert evaluate(snapshot).category == "RED"


def test_override_forces_red_over_stable_patient(stable_patient):
    stable_patient.update({"manual_override": "yes", "override_reason": "Gut feeling"})
    output = evaluate(stable_patient)
    assert output.category == "RED"
    assert output.flags[0].message == "Clinical Concern Override: Gut feeling"


def test_pipeline_is_idempotent(stable_patient):
    stable_patient.update({"lactate": "4.4", "crp_trend": "worsening", "delirium": "yes", "sbp": "80"})
    first = evaluate(stable_patient).model_dump_json()
    second = evaluate(stable_patient).model_dump_json()
    assert first == second


def test_evaluate_does_not_mutate_input(stable_patient):
    stable_patient["hb"] = "75"
    before = dict(stable_patient)
    evaluate(stable_patient)
    evaluate(ObservationSnapshot(stable_patient))
    assert stable_patient == before


def test_red_plan_reflects_flag_topics(stable_patient, pack):
    stable_patient.update({"creatinine": "150", "creatinine_baseline": "80", "lactate": "4.5"})
    output = evaluate(stable_patient)
    assert output.category == "RED"
    assert pack.plans.clauses["kidney"] in output.plan
    assert pack.plans.clauses["lactate"] in output.plan
    assert pack.plans.clauses["sepsis"] not in output.plan


def test_gold_scenarios(stable_patient, pack):
    cases = json.loads(GOLD_PATH.read_text(encoding="utf-8"))
    for case in cases:
        snapshot = dict(stable_patient, **case["changes"])
        output = evaluate(snapshot)
        expected = case["expected"]
        assert output.category == expected["category"], case["name"]
        assert output.score == expected["score"], case["name"]
        assert len(output.flags) == expected["flag_count"], case["name"]
        assert output.early_warning.effective_score == expected["adds"], case["name"]
        if output.category == "RED":
            for topic in expected["plan_topics"]:
                assert pack.plans.clauses[topic] in output.plan, case["name"]


def test_override_reason_naming_topics_adds_plan_clauses(stable_patient, pack):
    stable_patient.update({"manual_override": True, "override_reason": "lactate rising, CRP climbing"})
    output = evaluate(stable_patient)
    assert output.category == "RED"
    assert output.score == 6
    assert pack.plans.clauses["lactate"] in output.plan
    assert pack.plans.clauses["sepsis"] in output.plan
    assert pack.plans.clauses["kidney"] not in output.plan
