"""Flag and aggregate-score generator."""

from __future__ import annotations

import logging
from typing import Mapping

from ...schemas.assessment import RiskAssessment
from ..normalizer.snapshot import ObservationSnapshot
from ..plan import resolve_category
from ..scores import compute_early_warning
from .registry import run_rules

__all__ = ["assess"]

logger = logging.getLogger(__name__)


def assess(snapshot: Mapping[str, object]) -> RiskAssessment:
    """Evaluate every rule over *snapshot* and resolve the category."""

    obs = snapshot if isinstance(snapshot, ObservationSnapshot) else ObservationSnapshot(snapshot)
    adds = compute_early_warning(obs)
    flags, score = run_rules(obs, adds)
    category = resolve_category(score)
    logger.debug(
        "Assessment: adds=%d/%d flags=%d score=%d category=%s",
        adds.computed_score,
        adds.effective_score,
        len(flags),
        score,
        category,
    )
    return RiskAssessment(flags=flags, score=score, category=category, early_warning=adds)
