"""
Presentation - Display projections and serializable schemas.
"""

from .schemas import (
    GameView,
    StateSnapshot,
    PlayInfo,
    ErrorResponse,
    ErrorCode,
    PhaseInfo,
    OutcomeInfo,
)
from .view import render, snapshot

__all__ = [
    "GameView",
    "StateSnapshot",
    "PlayInfo",
    "ErrorResponse",
    "ErrorCode",
    "PhaseInfo",
    "OutcomeInfo",
    "render",
    "snapshot",
]
