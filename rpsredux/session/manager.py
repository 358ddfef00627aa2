"""
Session Manager - Creates and manages rounds.

LIFECYCLE:
1. Players start a round -> create an ephemeral session with a fresh store
2. During the round each choice is dispatched to the session's store
3. Round resolves -> session stays readable until it is ended
4. Another round means another session; there is no reset

PERSISTENCE RULES:
- Sessions live in memory only
- Ending a session drops its store and history
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import time
import uuid

from ..config import SESSION_MAX_AGE
from ..engine_core.action import Action
from ..engine_core.state import GameState, Weapon
from ..store import Store

log = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a session."""
    CREATED = "created"  # No choice made yet
    ACTIVE = "active"  # Player one has chosen
    RESOLVED = "resolved"  # Both players have chosen
    ENDED = "ended"  # Removed from the manager


@dataclass
class Session:
    """
    One round of play.

    Contains:
    - The store holding the round's state
    - Session metadata
    """
    session_id: str
    store: Store
    created_at: float
    ended: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def game_state(self) -> GameState:
        return self.store.state

    @property
    def status(self) -> SessionState:
        if self.ended:
            return SessionState.ENDED
        state = self.store.state
        if state.is_resolved:
            return SessionState.RESOLVED
        if state.player1_play.chosen:
            return SessionState.ACTIVE
        return SessionState.CREATED

    def is_active(self) -> bool:
        """Check if the round still waits for a choice."""
        return self.status in {SessionState.CREATED, SessionState.ACTIVE}

    def play(self, weapon: Weapon) -> GameState:
        """Dispatch a choice for whoever's turn it is."""
        return self.store.dispatch(Action.choose(weapon))


class SessionManager:
    """
    Manages sessions.

    Responsibilities:
    - Create sessions with their own store
    - Track open sessions
    - Clean up finished sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(self, metadata: dict[str, Any] | None = None) -> Session:
        """Create a new session holding a fresh round."""
        session = Session(
            session_id=str(uuid.uuid4()),
            store=Store(),
            created_at=time.time(),
            metadata=metadata or {},
        )
        self._sessions[session.session_id] = session
        log.info("Session %s created", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if no such session exists.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.ended = True
        log.info("Session %s ended (%s)", session_id, reason)
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all open sessions."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions whose round is not resolved."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: float = SESSION_MAX_AGE) -> list[str]:
        """
        End finished sessions older than max_age.

        Rounds still waiting for a choice are kept.

        Returns the IDs that were removed.
        """
        current_time = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds and not session.is_active()
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return stale
