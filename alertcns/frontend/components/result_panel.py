"""Render the category, flags and plan of an assessment."""
from __future__ import annotations

import streamlit as st

from ...core.plan import category_label
from ...schemas.assessment import AssessmentOutput
from ..utils.formatting import adds_caption, category_badge_html, flags_markdown


def render_result(output: AssessmentOutput) -> None:
    st.markdown(
        category_badge_html(category_label(output.category), output.category),
        unsafe_allow_html=True,
    )
    st.caption(f"Score {output.score} | {adds_caption(output.early_warning)}")
    if output.early_warning.met_call:
        st.error(f"MET call criteria: {output.early_warning.met_reason}")

    col_red, col_amber = st.columns(2)
    with col_red:
        st.write("#### Red flags")
        st.markdown(flags_markdown(output.flags, "RED"))
    with col_amber:
        st.write("#### Amber flags")
        st.markdown(flags_markdown(output.flags, "AMBER"))

    if output.early_warning.reasons:
        with st.expander("ADDS reasons"):
            st.markdown("\n".join(f"- {reason}" for reason in output.early_warning.reasons))

    st.write("#### Recommended action plan")
    st.write(output.plan)
