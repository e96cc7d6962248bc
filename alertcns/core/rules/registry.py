"""Rule registry folding independent evaluators into one aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ...schemas.assessment import EarlyWarningResult, RiskFlag, Severity, Topic
from ..normalizer.snapshot import ObservationSnapshot

__all__ = ["Finding", "RuleFunc", "finding", "register", "registered_rules", "run_rules"]


@dataclass(frozen=True)
class Finding:
    flag: RiskFlag
    weight: int


RuleFunc = Callable[[ObservationSnapshot, EarlyWarningResult], List[Finding]]

_REGISTRY: List[Tuple[str, RuleFunc]] = []


def register(name: str) -> Callable[[RuleFunc], RuleFunc]:
    """Append a rule evaluator; evaluation follows registration order."""

    def decorator(func: RuleFunc) -> RuleFunc:
        if any(existing == name for existing, _ in _REGISTRY):
            raise ValueError(f"Rule '{name}' already registered")
        _REGISTRY.append((name, func))
        return func

    return decorator


def registered_rules() -> List[str]:
    return [name for name, _ in _REGISTRY]


def finding(severity: Severity, message: str, weight: int, topic: Optional[Topic] = None) -> Finding:
    return Finding(flag=RiskFlag(severity=severity, message=message, topic=topic), weight=weight)


def run_rules(obs: ObservationSnapshot, adds: EarlyWarningResult) -> Tuple[List[RiskFlag], int]:
    """Evaluate every rule and return ``(flags, score)``.

    Red flags come first, then amber, each in rule evaluation order.
    """

    red: List[RiskFlag] = []
    amber: List[RiskFlag] = []
    score = 0
    for _, func in _REGISTRY:
        for item in func(obs, adds):
            (red if item.flag.severity == "RED" else amber).append(item.flag)
            score += item.weight
    return red + amber, score
