"""
Pytest fixtures for rpsredux tests.
"""

import pytest

from ..engine_core.state import GameState, Weapon
from ..engine_core.action import Action
from ..engine_core.reducer import reduce
from ..store import Store
from ..session import SessionManager


@pytest.fixture
def initial_state() -> GameState:
    """A fresh round."""
    return GameState.initial()


@pytest.fixture
def player1_rock_state(initial_state: GameState) -> GameState:
    """Player one has chosen rock, player two to act."""
    return reduce(initial_state, Action.choose(Weapon.ROCK))


@pytest.fixture
def resolved_state(player1_rock_state: GameState) -> GameState:
    """Rock against scissors: player one won."""
    return reduce(player1_rock_state, Action.choose(Weapon.SCISSORS))


@pytest.fixture
def store() -> Store:
    """A store built the default way (no prior state)."""
    return Store(reducer=reduce, state=None)


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()
