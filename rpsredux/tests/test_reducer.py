"""
Tests for the reducer (state transitions).

Tests:
- Initial state
- Turn ordering
- Round resolution for every weapon pair
- Unrecognized actions
- Purity
"""

import pytest

from ..engine_core.state import (
    GameState, Weapon, Player, Message, Outcome, RoundPhase, Chosen, Unchosen, Turn,
)
from ..engine_core.action import Action, ActionType
from ..engine_core.reducer import reduce, resolve, BEATS


class TestInitialState:
    """Tests for the default state."""

    def test_missing_state_is_replaced(self):
        """reduce(None, ...) starts from the initial state."""
        state = reduce(None, Action.init())

        assert state == GameState.initial()
        assert state.message == Message.PLAYER1_CHOOSE
        assert state.turn.player == Player.ONE
        assert not state.player1_play.chosen
        assert not state.player2_play.chosen
        assert state.result is None

    def test_initial_phase(self, initial_state):
        assert initial_state.phase == RoundPhase.AWAITING_PLAYER1
        assert not initial_state.is_resolved
        assert initial_state.winner is None

    def test_choice_from_missing_state(self):
        """A choice on a missing state is player one's choice."""
        state = reduce(None, Action.choose(Weapon.PAPER))

        assert state.player1_play == Chosen(Weapon.PAPER)
        assert state.turn.player == Player.TWO


class TestPlayerOneChoice:
    """Tests for the first choice of a round."""

    def test_records_weapon_and_passes_turn(self, initial_state):
        state = reduce(initial_state, Action.choose(Weapon.ROCK))

        assert state.player1_play == Chosen(Weapon.ROCK)
        assert isinstance(state.player2_play, Unchosen)
        assert state.turn.player == Player.TWO
        assert state.message == Message.PLAYER2_CHOOSE
        assert state.phase == RoundPhase.AWAITING_PLAYER2

    def test_single_choice_leaves_result_unset(self, initial_state):
        """Scenario D: rock from player one only."""
        state = reduce(initial_state, Action.choose(Weapon.ROCK))

        assert state.result is None
        assert state.message == Message.PLAYER2_CHOOSE


class TestResolution:
    """Tests for the beats-relation."""

    @pytest.mark.parametrize("w1,w2,expected", [
        (Weapon.ROCK, Weapon.ROCK, Outcome.DRAW),
        (Weapon.ROCK, Weapon.PAPER, Outcome.PLAYER2_WINS),
        (Weapon.ROCK, Weapon.SCISSORS, Outcome.PLAYER1_WINS),
        (Weapon.PAPER, Weapon.ROCK, Outcome.PLAYER1_WINS),
        (Weapon.PAPER, Weapon.PAPER, Outcome.DRAW),
        (Weapon.PAPER, Weapon.SCISSORS, Outcome.PLAYER2_WINS),
        (Weapon.SCISSORS, Weapon.ROCK, Outcome.PLAYER2_WINS),
        (Weapon.SCISSORS, Weapon.PAPER, Outcome.PLAYER1_WINS),
        (Weapon.SCISSORS, Weapon.SCISSORS, Outcome.DRAW),
    ])
    def test_round_result(self, initial_state, w1, w2, expected):
        state = reduce(initial_state, Action.choose(w1))
        state = reduce(state, Action.choose(w2))

        assert state.result == expected
        assert resolve(w1, w2) == expected
        assert state.player1_play == Chosen(w1)
        assert state.player2_play == Chosen(w2)

    def test_player1_wins_message(self, resolved_state):
        """Scenario A: rock beats scissors."""
        assert resolved_state.result == Outcome.PLAYER1_WINS
        assert resolved_state.message == Message.PLAYER1_WINS
        assert resolved_state.winner == Player.ONE

    def test_player2_wins_message(self, player1_rock_state):
        """Scenario B: paper beats rock."""
        state = reduce(player1_rock_state, Action.choose(Weapon.PAPER))

        assert state.result == Outcome.PLAYER2_WINS
        assert state.message == Message.PLAYER2_WINS
        assert state.winner == Player.TWO

    def test_draw_message(self, initial_state):
        """Scenario C: paper against paper."""
        state = reduce(initial_state, Action.choose(Weapon.PAPER))
        state = reduce(state, Action.choose(Weapon.PAPER))

        assert state.result == Outcome.DRAW
        assert state.message == Message.DRAW
        assert state.winner is None

    def test_turn_not_advanced_after_resolution(self, resolved_state):
        assert resolved_state.turn.player == Player.TWO
        assert resolved_state.phase == RoundPhase.RESOLVED

    def test_beats_is_a_cycle(self):
        """Every weapon beats exactly one other and is beaten by exactly one."""
        assert set(BEATS) == set(Weapon)
        assert set(BEATS.values()) == set(Weapon)
        for winner, loser in BEATS.items():
            assert winner != loser
            assert BEATS[loser] != winner


class TestMissingPlayerOneChoice:
    """Player two's turn without a player one weapon never guesses one."""

    def test_state_unchanged(self):
        state = GameState(message=Message.PLAYER2_CHOOSE, turn=Turn(player=Player.TWO))
        assert isinstance(state.player1_play, Unchosen)

        new_state = reduce(state, Action.choose(Weapon.PAPER))

        assert new_state is state
        assert new_state.result is None
        assert not new_state.player2_play.chosen


class TestResolvedRound:
    """A resolved round is terminal."""

    def test_further_choices_ignored(self, resolved_state):
        state = reduce(resolved_state, Action.choose(Weapon.PAPER))

        assert state is resolved_state
        assert state.result == Outcome.PLAYER1_WINS


class TestUnrecognizedActions:
    """Anything that is not a weapon choice is an identity transition."""

    @pytest.mark.parametrize("action", [
        Action.init(),
        Action(action_type=ActionType.CHOOSE_WEAPON, weapon=None),
        "choose rock",
        None,
        object(),
    ])
    def test_state_unchanged(self, player1_rock_state, action):
        state = reduce(player1_rock_state, action)

        assert state is player1_rock_state

    def test_unrecognized_on_missing_state_gives_initial(self):
        assert reduce(None, "noop") == GameState.initial()


class TestPurity:
    """The reducer never mutates the prior snapshot."""

    def test_prior_state_untouched(self, initial_state):
        before = GameState.initial()
        after = reduce(initial_state, Action.choose(Weapon.SCISSORS))

        assert initial_state == before
        assert after is not initial_state

    def test_snapshots_are_frozen(self, initial_state):
        with pytest.raises(AttributeError):
            initial_state.result = Outcome.DRAW

    def test_same_inputs_same_output(self, player1_rock_state):
        a = reduce(player1_rock_state, Action.choose(Weapon.PAPER))
        b = reduce(player1_rock_state, Action.choose(Weapon.PAPER))

        assert a == b


class TestResultInvariant:
    """result is set if and only if both plays are chosen."""

    def test_invariant_through_a_round(self, initial_state):
        state = initial_state
        for weapon in (Weapon.SCISSORS, Weapon.ROCK, Weapon.PAPER):
            both_chosen = state.player1_play.chosen and state.player2_play.chosen
            assert (state.result is not None) == both_chosen
            state = reduce(state, Action.choose(weapon))

        assert state.result == Outcome.PLAYER2_WINS


class TestWeaponParsing:

    @pytest.mark.parametrize("text,expected", [
        ("rock", Weapon.ROCK),
        ("  Paper ", Weapon.PAPER),
        ("SCISSORS", Weapon.SCISSORS),
    ])
    def test_parse(self, text, expected):
        assert Weapon.parse(text) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown weapon"):
            Weapon.parse("lizard")

    def test_labels(self):
        assert [w.label for w in Weapon] == ["Rock", "Paper", "Scissors"]
