"""
Session Module - Manages ephemeral rounds.

A session represents one round:
- Created when players start a round
- Holds the store for that round
- Destroyed when it is ended

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
