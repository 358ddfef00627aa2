"""
Action System - Intents that drive state transitions.

Actions represent:
1. Player choices (a weapon for whoever's turn it is)
2. Store bookkeeping (the init action sent once at construction)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .state import Weapon


class ActionType(Enum):
    """Types of actions in the system."""
    # Player actions
    CHOOSE_WEAPON = "choose_weapon"

    # System actions
    INIT = "@@rpsredux/init"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be dispatched to the store.

    Actions are:
    - Recorded in the store history for replay
    - Applied to completion by the reducer, one at a time
    """
    action_type: ActionType
    weapon: Weapon | None = None

    @classmethod
    def choose(cls, weapon: Weapon) -> Action:
        """Factory for a weapon choice."""
        return cls(action_type=ActionType.CHOOSE_WEAPON, weapon=weapon)

    @classmethod
    def init(cls) -> Action:
        """Factory for the store's initialization action."""
        return cls(action_type=ActionType.INIT)
