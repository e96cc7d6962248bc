"""Rule package; module import order fixes the rule evaluation order."""

from . import vitals, labs, context  # noqa: F401  (registration order matters)
from .engine import assess
from .registry import registered_rules

__all__ = ["assess", "registered_rules"]
