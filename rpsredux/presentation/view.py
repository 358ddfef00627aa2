"""
View projection - Turns snapshots into display data.

Nothing here draws anything; a front-end subscribes to the store
and renders the GameView it gets from render().
"""

from __future__ import annotations

from ..engine_core.state import GameState, Play, Chosen
from .schemas import GameView, StateSnapshot, PlayInfo, PhaseInfo, OutcomeInfo

HIDDEN_CHOICE = "chosen"


def render(state: GameState) -> GameView:
    """Project a snapshot onto what the screen shows."""
    p1, p2 = state.player1_play, state.player2_play
    if isinstance(p1, Chosen) and isinstance(p2, Chosen):
        placeholder1, placeholder2 = p1.weapon.label, p2.weapon.label
    else:
        placeholder1 = HIDDEN_CHOICE if p1.chosen else ""
        placeholder2 = ""

    return GameView(
        message=state.message.value,
        placeholder1=placeholder1,
        placeholder2=placeholder2,
        phase=PhaseInfo(state.phase.value),
        result=_outcome(state),
    )


def snapshot(state: GameState) -> StateSnapshot:
    """Dump the full state, weapons included."""
    return StateSnapshot(
        message=state.message.value,
        turn=state.turn.player.value,
        player1_play=_play_info(state.player1_play),
        player2_play=_play_info(state.player2_play),
        result=_outcome(state),
        phase=PhaseInfo(state.phase.value),
    )


def _play_info(play: Play) -> PlayInfo:
    if isinstance(play, Chosen):
        return PlayInfo(chosen=True, weapon=play.weapon.value)
    return PlayInfo(chosen=False)


def _outcome(state: GameState) -> OutcomeInfo | None:
    if state.result is None:
        return None
    return OutcomeInfo(state.result.value)
