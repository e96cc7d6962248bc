"""Early-warning score package."""

from .adds import band_score, compute_early_warning

__all__ = ["band_score", "compute_early_warning"]
