"""
Game State - Immutable snapshot of a single round.

Design principles:
- Immutable: snapshots are frozen, the reducer builds new ones
- Structural: "no weapon chosen" is its own type, never a missing value
- Serializable: every field is an enum or a small dataclass
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Weapon(Enum):
    """Weapons a player can choose."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def label(self) -> str:
        """Display name ("Rock", "Paper", "Scissors")."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> Weapon:
        """
        Parse a weapon name, ignoring case and surrounding whitespace.

        Raises ValueError for anything that is not a weapon.
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            names = ", ".join(w.value for w in cls)
            raise ValueError(f"Unknown weapon: {text!r} (expected one of: {names})") from None


class Player(Enum):
    ONE = "one"
    TWO = "two"


class Message(Enum):
    """What the front-end should display."""
    PLAYER1_CHOOSE = "PLAYER 1 - Choose your weapon:"
    PLAYER2_CHOOSE = "PLAYER 2 - Choose your weapon:"
    PLAYER1_WINS = "PLAYER 1 WINS!"
    PLAYER2_WINS = "PLAYER 2 WINS!"
    DRAW = "DRAW!"


class Outcome(Enum):
    """Result of a resolved round."""
    DRAW = "draw"
    PLAYER1_WINS = "player1wins"
    PLAYER2_WINS = "player2wins"


class RoundPhase(Enum):
    """High-level phases of a round."""
    AWAITING_PLAYER1 = "awaiting_player1"
    AWAITING_PLAYER2 = "awaiting_player2"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class Unchosen:
    """A play where no weapon has been picked yet."""

    @property
    def chosen(self) -> bool:
        return False


@dataclass(frozen=True)
class Chosen:
    """A play with a weapon picked."""
    weapon: Weapon

    @property
    def chosen(self) -> bool:
        return True


Play = Union[Unchosen, Chosen]

UNCHOSEN = Unchosen()


@dataclass(frozen=True)
class Turn:
    player: Player


@dataclass(frozen=True)
class GameState:
    """
    Complete round state at a point in time.

    Only the reducer produces new snapshots. Invariant: `result` is set
    if and only if both plays are Chosen.
    """
    message: Message
    turn: Turn
    player1_play: Play = UNCHOSEN
    player2_play: Play = UNCHOSEN
    result: Outcome | None = None

    @classmethod
    def initial(cls) -> GameState:
        """Fresh round: player one to act, nothing chosen."""
        return cls(
            message=Message.PLAYER1_CHOOSE,
            turn=Turn(player=Player.ONE),
        )

    @property
    def phase(self) -> RoundPhase:
        if self.result is not None:
            return RoundPhase.RESOLVED
        if self.turn.player == Player.TWO:
            return RoundPhase.AWAITING_PLAYER2
        return RoundPhase.AWAITING_PLAYER1

    @property
    def is_resolved(self) -> bool:
        return self.result is not None

    @property
    def winner(self) -> Player | None:
        """The winning player, or None for a draw or an unresolved round."""
        if self.result == Outcome.PLAYER1_WINS:
            return Player.ONE
        if self.result == Outcome.PLAYER2_WINS:
            return Player.TWO
        return None

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            message=kwargs.get("message", self.message),
            turn=kwargs.get("turn", self.turn),
            player1_play=kwargs.get("player1_play", self.player1_play),
            player2_play=kwargs.get("player2_play", self.player2_play),
            result=kwargs.get("result", self.result),
        )
