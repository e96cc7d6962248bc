"""Helpers to load the step-down content packs."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import yaml

from ..schemas.pack import StepdownPack

__all__ = ["load_pack", "load_stepdown_pack"]


@lru_cache(maxsize=8)
def load_pack(pack_id: str) -> Dict[str, Any]:
    """Load the raw YAML pack identified by *pack_id*."""

    with resources.files(__name__).joinpath(f"{pack_id}.yml").open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


@lru_cache(maxsize=8)
def load_stepdown_pack(pack_id: str) -> StepdownPack:
    """Load and validate a pack into a :class:`StepdownPack`."""

    return StepdownPack.model_validate(load_pack(pack_id))
