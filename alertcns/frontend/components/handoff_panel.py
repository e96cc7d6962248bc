"""Handoff key generation and loading."""
from __future__ import annotations

import logging

import streamlit as st

from ...core.normalizer.snapshot import ObservationSnapshot
from ...persistence import HandoffKeyError, decode_handoff, encode_handoff
from ..utils.state import ReviewState, load_into_widgets

logger = logging.getLogger(__name__)


def _load_pasted(review: ReviewState) -> None:
    pasted = st.session_state.get("handoff_paste", "")
    if not pasted:
        return
    try:
        data = decode_handoff(pasted)
    except HandoffKeyError as exc:
        review.messages.append(str(exc))
        return
    skipped = load_into_widgets(st.session_state, data, overwrite=True)
    if skipped:
        logger.info("Handoff fields not loaded: %s", ", ".join(skipped))
    st.session_state["handoff_paste"] = ""
    review.messages.append("Handoff key loaded.")


def render_handoff(snapshot: ObservationSnapshot, review: ReviewState) -> None:
    st.subheader("Handoff")
    col1, col2 = st.columns(2)
    if col1.button("Get handoff key"):
        review.handoff_key = encode_handoff(snapshot)
    if review.handoff_key:
        col1.code(review.handoff_key, language=None)

    col2.text_area("Paste handoff key", key="handoff_paste")
    col2.button("Load pasted data", on_click=_load_pasted, args=(review,))
    while review.messages:
        message = review.messages.pop(0)
        if message == "Handoff key loaded.":
            col2.success(message)
        else:
            col2.error(message)
