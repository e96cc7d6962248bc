"""High-level pipeline: snapshot -> ADDS -> flags and score -> category -> plan."""

from __future__ import annotations

import logging
from typing import Mapping

from ..schemas.assessment import AssessmentOutput
from .normalizer.snapshot import ObservationSnapshot
from .plan import generate_plan
from .rules import assess

__all__ = ["evaluate"]

logger = logging.getLogger(__name__)


def evaluate(snapshot: Mapping[str, object]) -> AssessmentOutput:
    obs = snapshot if isinstance(snapshot, ObservationSnapshot) else ObservationSnapshot(snapshot)
    assessment = assess(obs)
    plan = generate_plan(assessment.category, assessment.flags)
    if assessment.early_warning.met_call:
        logger.info("MET criteria met: %s", assessment.early_warning.met_reason)
    return AssessmentOutput(
        category=assessment.category,
        score=assessment.score,
        flags=assessment.flags,
        plan=plan,
        early_warning=assessment.early_warning,
    )
