"""Category resolution and action-plan text generation."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Set, Tuple

from ..content import load_stepdown_pack
from ..schemas.assessment import Category, RiskFlag
from ..schemas.pack import StepdownPack
from .config import get_settings

__all__ = ["PLAN_KEYWORDS", "PLAN_TOPICS", "flagged_topics", "category_label", "generate_plan", "resolve_category"]

RED_ABOVE = 5
AMBER_FROM = 3

# Clause order in the RED plan, with the flag-text keywords that select each clause
PLAN_TOPICS = ("kidney", "lactate", "liver", "sepsis")
PLAN_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "kidney": ("kidney", "creatinine"),
    "lactate": ("lactate",),
    "liver": ("bilirubin",),
    "sepsis": ("crp", "wbc"),
}


def resolve_category(score: int) -> Category:
    if score > RED_ABOVE:
        return "RED"
    if score >= AMBER_FROM:
        return "AMBER"
    return "GREEN"


def _pack(pack: Optional[StepdownPack]) -> StepdownPack:
    return pack or load_stepdown_pack(get_settings().content_pack)


def flagged_topics(flags: Iterable[RiskFlag]) -> Set[str]:
    """Return the plan topics named anywhere in the flag messages (case-insensitive)."""

    texts = [flag.message.lower() for flag in flags]
    return {
        topic
        for topic, keywords in PLAN_KEYWORDS.items()
        if any(keyword in text for text in texts for keyword in keywords)
    }


def category_label(category: Category, pack: Optional[StepdownPack] = None) -> str:
    return _pack(pack).categories.get(category, category)


def generate_plan(
    category: Category,
    flags: Iterable[RiskFlag],
    pack: Optional[StepdownPack] = None,
) -> str:
    """Return the plan for *category*; RED plans add one clause per topic named in the flags."""

    templates = _pack(pack).plans
    if category == "AMBER":
        return templates.amber
    if category != "RED":
        return templates.green

    topics = flagged_topics(flags)
    parts = [templates.red]
    for topic in PLAN_TOPICS:
        clause = templates.clauses.get(topic)
        if topic in topics and clause:
            parts.append(clause)
    return " ".join(parts)
