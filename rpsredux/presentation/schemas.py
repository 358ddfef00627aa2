"""
Pydantic Schemas - Serializable views of the game state.

These models define what a front-end or the CLI sees.
Enums are str-valued so dumps are plain JSON.

Error Codes:
- INVALID_WEAPON: A weapon name could not be parsed
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    INVALID_WEAPON = "INVALID_WEAPON"


class PhaseInfo(str, Enum):
    AWAITING_PLAYER1 = "awaiting_player1"
    AWAITING_PLAYER2 = "awaiting_player2"
    RESOLVED = "resolved"


class OutcomeInfo(str, Enum):
    DRAW = "draw"
    PLAYER1_WINS = "player1wins"
    PLAYER2_WINS = "player2wins"


# =============================================================================
# Models
# =============================================================================

class PlayInfo(BaseModel):
    """One player's play."""
    chosen: bool
    weapon: Optional[str] = Field(None, description="Weapon value, only once chosen")


class GameView(BaseModel):
    """
    What the screen shows for a snapshot.

    Player one's weapon stays hidden until player two has chosen.
    """
    message: str
    placeholder1: str = ""
    placeholder2: str = ""
    phase: PhaseInfo
    result: Optional[OutcomeInfo] = None


class StateSnapshot(BaseModel):
    """Full dump of a GameState."""
    message: str
    turn: str = Field(..., description="Player to act: 'one' or 'two'")
    player1_play: PlayInfo
    player2_play: PlayInfo
    result: Optional[OutcomeInfo] = None
    phase: PhaseInfo


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
