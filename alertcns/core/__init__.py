"""Deterministic risk engine: early-warning score, rule flags and plans."""
