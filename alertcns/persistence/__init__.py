"""Snapshot persistence collaborators: handoff keys and session storage."""

from .handoff import HandoffKeyError, apply_handoff, decode_handoff, encode_handoff
from .session import SessionStore

__all__ = ["HandoffKeyError", "SessionStore", "apply_handoff", "decode_handoff", "encode_handoff"]
