"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through reduce().

Design principles:
- Pure function: (state, action) -> new_state
- Total: every input maps to a state, nothing raises
- Never mutates the prior snapshot
- Unknown actions return the prior snapshot unchanged
"""

from __future__ import annotations
from typing import Any

from .state import (
    GameState, RoundPhase, Weapon, Player, Message, Outcome, Chosen, Turn,
)
from .action import Action, ActionType


# Each weapon maps to the weapon it defeats.
BEATS: dict[Weapon, Weapon] = {
    Weapon.ROCK: Weapon.SCISSORS,
    Weapon.SCISSORS: Weapon.PAPER,
    Weapon.PAPER: Weapon.ROCK,
}

_OUTCOME_MESSAGES = {
    Outcome.DRAW: Message.DRAW,
    Outcome.PLAYER1_WINS: Message.PLAYER1_WINS,
    Outcome.PLAYER2_WINS: Message.PLAYER2_WINS,
}


def resolve(player1_weapon: Weapon, player2_weapon: Weapon) -> Outcome:
    """Decide a round from the two weapons."""
    if player1_weapon == player2_weapon:
        return Outcome.DRAW
    if BEATS[player1_weapon] == player2_weapon:
        return Outcome.PLAYER1_WINS
    return Outcome.PLAYER2_WINS


def reduce(state: GameState | None, action: Any) -> GameState:
    """
    Apply an action to the game state.

    A missing state is replaced by GameState.initial(). Anything other
    than a weapon choice, or a choice made after the round is resolved,
    returns the state as-is.
    """
    state = state if state is not None else GameState.initial()

    if not _is_weapon_choice(action):
        return state

    phase = state.phase
    if phase == RoundPhase.AWAITING_PLAYER1:
        return _handle_player1_choice(state, action.weapon)
    if phase == RoundPhase.AWAITING_PLAYER2:
        return _handle_player2_choice(state, action.weapon)

    # Resolved rounds are terminal
    return state


def _is_weapon_choice(action: Any) -> bool:
    return (
        isinstance(action, Action)
        and action.action_type == ActionType.CHOOSE_WEAPON
        and isinstance(action.weapon, Weapon)
    )


def _handle_player1_choice(state: GameState, weapon: Weapon) -> GameState:
    """Record player one's weapon and pass the turn."""
    return state._copy_with(
        player1_play=Chosen(weapon),
        turn=Turn(player=Player.TWO),
        message=Message.PLAYER2_CHOOSE,
    )


def _handle_player2_choice(state: GameState, weapon: Weapon) -> GameState:
    """Record player two's weapon and decide the round."""
    player1_play = state.player1_play
    if not isinstance(player1_play, Chosen):
        # Player two's turn always follows a player one choice
        return state

    outcome = resolve(player1_play.weapon, weapon)
    return state._copy_with(
        player2_play=Chosen(weapon),
        result=outcome,
        message=_OUTCOME_MESSAGES[outcome],
    )
