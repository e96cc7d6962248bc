"""Streamlit entrypoint for the ALERT step-down review tool."""
from __future__ import annotations

import streamlit as st

from alertcns.core.config import settings
from alertcns.core.fields import ALL_FIELDS
from alertcns.core.logging import setup_logging
from alertcns.core.orchestrator import evaluate
from alertcns.core.summary import generate_summary
from alertcns.frontend.components import assessment_form, handoff_panel, result_panel
from alertcns.frontend.utils import state
from alertcns.persistence import SessionStore

setup_logging()

st.set_page_config(page_title=settings.app_title, layout="wide")
st.title(settings.app_title)
st.caption("Decision support only. Does not replace clinical judgement.")

store = SessionStore(st.session_state)
review = state.get_state(st.session_state)
state.load_into_widgets(st.session_state, store.load_or_default())


def _start_over() -> None:
    store.clear()
    state.reset_widgets(st.session_state, ALL_FIELDS)
    review.handoff_key = None


col_form, col_result = st.columns([1.3, 1.0])

with col_form:
    assessment_form.render_assessment_form()

snapshot = state.gather_snapshot(st.session_state, ALL_FIELDS)
store.save(snapshot)
output = evaluate(snapshot)

with col_result:
    st.subheader("Risk Assessment")
    result_panel.render_result(output)

    st.subheader("DMR Summary")
    st.code(generate_summary(snapshot), language=None)

    handoff_panel.render_handoff(snapshot, review)

    st.button("Start over", on_click=_start_over, type="secondary")
