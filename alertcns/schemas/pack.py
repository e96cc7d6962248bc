"""Schemas validating the YAML content pack (ADDS bands and plan text)."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from .common import StrictModel


class Band(StrictModel):
    max: Optional[float] = None
    score: int = Field(ge=0)
    met: bool = False
    note: Optional[str] = None


class VitalChannel(StrictModel):
    label: str
    bands: List[Band] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_bands(self) -> "VitalChannel":
        bounds = [band.max for band in self.bands]
        if bounds[-1] is not None:
            raise ValueError(f"{self.label}: last band must be open-ended")
        closed = bounds[:-1]
        if any(bound is None for bound in closed):
            raise ValueError(f"{self.label}: only the last band may be open-ended")
        if any(a >= b for a, b in zip(closed, closed[1:])):
            raise ValueError(f"{self.label}: band bounds must be strictly ascending")
        return self


class ConsciousnessRule(StrictModel):
    alert_value: str = "Alert"
    penalty: int = Field(default=3, ge=0)
    met_values: List[str] = []


class RespiratorySupportRule(StrictModel):
    room_air: str = "RA"
    penalty: int = Field(default=2, ge=0)
    low_spo2_below: float = 90
    low_spo2_penalty: int = Field(default=1, ge=0)


class AddsConfig(StrictModel):
    channels: Dict[str, VitalChannel]
    consciousness: ConsciousnessRule = ConsciousnessRule()
    respiratory_support: RespiratorySupportRule = RespiratorySupportRule()


class PlanTemplates(StrictModel):
    red: str
    amber: str
    green: str
    clauses: Dict[str, str] = {}

    @field_validator("clauses")
    @classmethod
    def _known_topics(cls, value: Dict[str, str]) -> Dict[str, str]:
        unknown = set(value) - {"kidney", "lactate", "liver", "sepsis"}
        if unknown:
            raise ValueError(f"Unknown plan topics: {sorted(unknown)}")
        return value


class PackMeta(StrictModel):
    name: str
    version: str


class StepdownPack(StrictModel):
    meta: PackMeta
    adds: AddsConfig
    categories: Dict[str, str]
    plans: PlanTemplates
