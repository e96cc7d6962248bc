"""Schemas defining the risk assessment output contract."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from .common import StrictModel

Category = Literal["RED", "AMBER", "GREEN"]
Severity = Literal["RED", "AMBER"]
Topic = Literal["kidney", "lactate", "liver", "sepsis"]


class EarlyWarningResult(StrictModel):
    computed_score: int = Field(ge=0)
    effective_score: int = Field(ge=0)
    overridden: bool = False
    met_call: bool = False
    met_reason: str = ""
    reasons: List[str] = []


class RiskFlag(StrictModel):
    severity: Severity
    message: str
    topic: Optional[Topic] = None


class RiskAssessment(StrictModel):
    flags: List[RiskFlag]
    score: int
    category: Category
    early_warning: EarlyWarningResult

    @property
    def red_flags(self) -> List[RiskFlag]:
        return [flag for flag in self.flags if flag.severity == "RED"]

    @property
    def amber_flags(self) -> List[RiskFlag]:
        return [flag for flag in self.flags if flag.severity == "AMBER"]


class AssessmentOutput(StrictModel):
    category: Category
    score: int
    flags: List[RiskFlag]
    plan: str
    early_warning: EarlyWarningResult
