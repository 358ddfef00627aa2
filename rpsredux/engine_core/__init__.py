"""
Engine Core - Round state and the pure reducer.

The engine:
1. Defines the immutable GameState
2. Defines the actions players dispatch
3. Applies actions via the reducer
"""

from .state import (
    GameState,
    Weapon,
    Player,
    Message,
    Outcome,
    RoundPhase,
    Play,
    Chosen,
    Unchosen,
    Turn,
)
from .action import Action, ActionType
from .reducer import reduce, resolve, BEATS

__all__ = [
    "GameState",
    "Weapon",
    "Player",
    "Message",
    "Outcome",
    "RoundPhase",
    "Play",
    "Chosen",
    "Unchosen",
    "Turn",
    "Action",
    "ActionType",
    "reduce",
    "resolve",
    "BEATS",
]
