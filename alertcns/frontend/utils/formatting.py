"""Markup helpers for rendering an assessment; no Streamlit import here."""
from __future__ import annotations

from html import escape
from typing import Iterable

from ...schemas.assessment import EarlyWarningResult, RiskFlag

PALETTE = {
    "RED": "#c62828",
    "AMBER": "#f9a825",
    "GREEN": "#2e7d32",
}


def category_badge_html(label: str, category: str) -> str:
    colour = PALETTE.get(category, "#455a64")
    return (
        f'<div style="background:{colour};padding:12px;border-radius:8px;'
        f'color:white;font-weight:600;text-align:center;">{escape(label)}</div>'
    )


def flags_markdown(flags: Iterable[RiskFlag], severity: str) -> str:
    lines = [f"- {flag.message}" for flag in flags if flag.severity == severity]
    return "\n".join(lines) if lines else "_None_"


def adds_caption(adds: EarlyWarningResult) -> str:
    if adds.overridden:
        text = f"ADDS {adds.effective_score} (override; calculated {adds.computed_score})"
    else:
        text = f"ADDS {adds.effective_score}"
    if adds.met_call:
        text += f" | MET: {adds.met_reason}"
    return text
