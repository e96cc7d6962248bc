"""Streamlit widgets capturing the step-down review form."""
from __future__ import annotations

import streamlit as st

from ..utils.state import TREND_OPTIONS, options_for

LAB_INPUTS = (
    ("Creatinine (µmol/L)", "creatinine"),
    ("Lactate (mmol/L)", "lactate"),
    ("Hb (g/L)", "hb"),
    ("Platelets (x10⁹/L)", "platelets"),
    ("Albumin (g/L)", "albumin"),
    ("Bilirubin (µmol/L)", "bilirubin"),
    ("CRP (mg/L)", "crp"),
    ("WBC (x10⁹/L)", "wcc"),
)


def _select(container, label: str, field_id: str) -> None:
    container.selectbox(label, options_for(field_id), key=field_id)


def _trend(container, field_id: str) -> None:
    if field_id not in st.session_state:
        st.session_state[field_id] = "stable"
    container.radio("Trend", TREND_OPTIONS, key=field_id, horizontal=True, label_visibility="collapsed")


def render_patient_details() -> None:
    with st.expander("Patient & Review Details", expanded=True):
        col1, col2 = st.columns(2)
        _select(col1, "Review type", "review_type")
        col2.text_input("Location (ward)", key="location")
        col1.text_input("Room no.", key="room_number")
        col2.text_input("Patient ID (initials + URN)", key="patient_id")
        col1.text_input("Step-down date", key="stepdown_date")
        col2.text_input("Weight (kg)", key="weight")
        col1.text_input("Age", key="age")
        _select(col2, "Admission type", "admission_type")
        col1.text_input("ICU LOS (days)", key="icu_los")
        col2.checkbox("After-hours discharge", key="after_hours")
        st.text_area("Reason for ICU", key="reason_icu")
        st.text_area("ICU summary", key="icu_summary")
        st.text_area("Past medical history", key="pmh")
        st.text_area("Severe comorbidities", key="severe_comorbidities")


def render_vitals() -> None:
    with st.expander("Core Vitals (ADDS entry)", expanded=True):
        for label, field_id in (
            ("Resp rate", "rr"),
            ("SpO2 (%)", "spo2"),
            ("Heart rate", "hr"),
            ("Systolic BP", "sbp"),
            ("Temperature (°C)", "temp"),
        ):
            col_value, col_trend = st.columns([1, 1])
            col_value.text_input(label, key=field_id)
            _trend(col_trend, f"{field_id}_trend")
        col1, col2 = st.columns(2)
        col1.text_input("Diastolic BP", key="dbp")
        _select(col2, "Consciousness", "neuro_consciousness")
        _select(col1, "O₂ device", "resp_device")
        if st.session_state.get("resp_device", "RA") != "RA":
            col2.text_input("Flow (L/min)", key="o2_flow")
            col2.text_input("FiO2 (%)", key="fio2")
        st.checkbox("Manually override ADDS score", key="adds_override")
        if st.session_state.get("adds_override"):
            st.text_input("Override ADDS score", key="adds_override_score")


def render_bloods() -> None:
    with st.expander("Blood Panel", expanded=True):
        for label, field_id in LAB_INPUTS:
            col_value, col_trend = st.columns([1, 1])
            col_value.text_input(label, key=field_id)
            _trend(col_trend, f"{field_id}_trend")
        st.text_input("Baseline creatinine (µmol/L)", key="creatinine_baseline")


def render_assessment() -> None:
    with st.expander("Assessment & Context", expanded=False):
        col1, col2 = st.columns(2)
        _select(col1, "Airway", "airway")
        _select(col2, "Cap refill", "cap_refill")
        col1.text_input("Urine output (last hr, mL)", key="urine_output_hr")
        _select(col2, "Delirium", "delirium")
        col1.text_input("Frailty score (CFS 1-9)", key="frailty_score")
        col2.checkbox("Frailty impression", key="frailty_impression")
        col1.text_input("Pain score (0-10)", key="pain_score")
        _select(col2, "Diet", "diet")
        col1.checkbox("High-risk ward placement", key="high_risk_ward")


def render_devices() -> None:
    with st.expander("Devices", expanded=False):
        st.checkbox("Complex device (e.g. tracheostomy, EVD, NIV)", key="complex_device")
        st.checkbox("PIVC 1", key="pivc_1_present")
        if st.session_state.get("pivc_1_present"):
            col1, col2 = st.columns(2)
            col1.text_input("PIVC 1 commencement date (YYYY-MM-DD)", key="pivc_1_commencement_date")
            _select(col2, "PIVC 1 site health", "pivc_1_site_health")
        st.checkbox("CVAD", key="cvad_present")
        if st.session_state.get("cvad_present"):
            col1, col2 = st.columns(2)
            _select(col1, "CVAD type", "cvad_type")
            _select(col2, "CVAD site health", "cvad_site_health")
            col1.text_input("CVAD commencement date (YYYY-MM-DD)", key="cvad_commencement_date")
        st.checkbox("IDC", key="idc_present")
        if st.session_state.get("idc_present"):
            st.text_input("IDC commencement date (YYYY-MM-DD)", key="idc_commencement_date")


def render_overrides() -> None:
    with st.expander("Context & Overrides", expanded=False):
        st.checkbox("Manual category upgrade - clinical concern", key="manual_override")
        st.text_area("Reason for upgrade", key="override_reason")
        st.text_area("Clinical impression (for DMR)", key="clinical_impression")
        st.text_area("Plan (replaces the generated plan in the DMR)", key="clinical_plan")


def render_assessment_form() -> None:
    render_patient_details()
    render_vitals()
    render_bloods()
    render_assessment()
    render_devices()
    render_overrides()
