"""
Tests for the game loop and play().
"""

import pytest
import numpy as np

from boxgame.core.config_loader import load_config
from boxgame.core.game import CoreGame, play, play_game
from boxgame.core.rng import generate_weights


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def game():
    return CoreGame()


class TestPlayScenarios:
    """End-to-end final scores."""

    def test_first_4_fibonacci(self):
        assert play([1, 1, 2, 3]) == (13.0, 25.0)

    def test_first_8_fibonacci(self):
        assert play([1, 1, 2, 3, 5, 8, 13, 21]) == (155.0, 366.25)

    def test_single_token(self):
        """A alone plays into Green 0.0."""
        assert play([5]) == (25.0, 0.0)

    def test_second_token_goes_to_next_lightest(self):
        """After A's turn, Green 0.1 is the lightest box."""
        assert play([1, 100]) == (1.0, 10000.0)

    def test_empty_input(self):
        assert play([]) == (0.0, 0.0)

    def test_accepts_any_iterable(self):
        assert play(iter([1, 1, 2, 3])) == (13.0, 25.0)
        assert play((w for w in [5])) == (25.0, 0.0)


class TestGameProperties:
    """Determinism, alternation and monotonicity."""

    def test_deterministic(self, config):
        weights = generate_weights(7, 40, config)

        assert play(weights) == play(weights)

    def test_games_are_independent(self):
        """No state leaks between play() calls."""
        play([100, 100, 100, 100])

        assert play([1, 1, 2, 3]) == (13.0, 25.0)

    def test_turn_alternation(self, config):
        """Even turns belong to A, odd turns to B."""
        result = play_game(generate_weights(42, 25, config))

        for event in result.events:
            expected = "A" if event.turn % 2 == 0 else "B"
            assert event.player == expected

    def test_scores_are_sums_of_turn_points(self, config):
        result = play_game(generate_weights(123, 30, config))

        points_a = sum(e.points for e in result.events if e.player == "A")
        points_b = sum(e.points for e in result.events if e.player == "B")

        assert result.score_a == pytest.approx(points_a)
        assert result.score_b == pytest.approx(points_b)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_scores_never_decrease(self, config, seed):
        """Each player's running score is non-decreasing."""
        game = CoreGame()
        last = {"A": 0.0, "B": 0.0}

        for weight in generate_weights(seed, 50, config):
            event = game.step(weight)
            score_a, score_b = game.scores
            current = {"A": score_a, "B": score_b}
            assert event.points >= 0.0
            assert current[event.player] >= last[event.player]
            last = current

    def test_token_goes_to_lightest_box(self, game):
        """Each event's box was the lightest (first minimum) before the turn."""
        for weight in [4, 0, 0, 7, 2, 2, 9, 1]:
            weights = np.array([b.current_weight for b in game.boxes])
            event = game.step(weight)
            assert event.box_index == int(np.argmin(weights))

    def test_zero_weights_keep_selecting_first_box(self):
        """Zero tokens never change the ordering."""
        result = play_game([0, 0, 0])

        assert [e.box_index for e in result.events] == [0, 0, 0]
        assert result.scores == (0.0, 0.0)

    def test_long_game_keeps_alternating(self):
        """The turn index is unbounded."""
        result = play_game([0] * 70000)

        assert result.turns == 70000
        assert result.events[65535].player == "B"
        assert result.events[65536].player == "A"
        assert result.events[65537].player == "B"


class TestCoreGame:
    """Stepwise game API."""

    def test_initial_state(self, game):
        assert game.turn == 0
        assert game.current_player.name == "A"
        assert game.scores == (0.0, 0.0)
        assert [b.current_weight for b in game.boxes] == [0.0, 0.1, 0.2, 0.3]

    def test_step_advances_turn(self, game):
        event = game.step(5)

        assert event.turn == 0
        assert event.player == "A"
        assert event.box_index == 0
        assert event.points == 25.0
        assert game.turn == 1
        assert game.current_player.name == "B"

    def test_reset_restores_initial_state(self, game):
        game.run([1, 1, 2, 3])
        game.reset()

        assert game.turn == 0
        assert game.scores == (0.0, 0.0)
        assert game.events == ()
        assert all(b.absorbed_count == 0 for b in game.boxes)
        assert game.run([1, 1, 2, 3]).scores == (13.0, 25.0)

    def test_run_continues_from_current_state(self, game):
        game.run([1, 1])
        result = game.run([2, 3])

        assert result.scores == (13.0, 25.0)
        assert result.turns == 4

    def test_players_track_own_turns(self, game):
        game.run([1, 2, 3, 4, 5])

        assert game.player_a.turns_taken == 3
        assert game.player_b.turns_taken == 2


class TestGameResult:
    """Winner determination."""

    def test_winner_b(self):
        assert play_game([1, 1, 2, 3]).winner == "B"

    def test_winner_a(self):
        assert play_game([5]).winner == "A"

    def test_draw(self):
        assert play_game([]).winner == "draw"


class TestSnapshot:
    """Snapshots of box state."""

    def test_initial_snapshot(self, game):
        snap = game.snapshot()

        assert snap.turn == 0
        assert snap.next_player == "A"
        assert snap.box_kinds == ("green", "green", "blue", "blue")
        np.testing.assert_allclose(snap.box_weights, [0.0, 0.1, 0.2, 0.3])
        assert snap.lightest_box == 0

    def test_snapshot_after_turn(self, game):
        game.step(1)
        snap = game.snapshot()

        assert snap.next_player == "B"
        assert snap.score_a == 1.0
        assert snap.lightest_box == 1
        assert snap.absorbed_counts.tolist() == [1, 0, 0, 0]

    def test_snapshot_is_a_copy(self, game):
        snap = game.snapshot()
        game.step(10)

        assert snap.box_weights[0] == 0.0

    def test_to_dict(self, game):
        game.run([1, 1, 2, 3])
        data = game.snapshot().to_dict()

        assert data["turn"] == 4
        assert data["score_a"] == 13.0
        assert data["score_b"] == 25.0
        assert data["absorbed_counts"] == [1, 1, 1, 1]
        assert isinstance(data["box_weights"], list)
