"""ALERT step-down risk assessment tool."""

__version__ = "0.1.0"
