"""
Core Game
=========

Main game orchestrator combining boxes, selection, and players.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from boxgame.core.box_catalog import build_boxes
from boxgame.core.boxes import Box
from boxgame.core.scoring import Player, ScoreEvent
from boxgame.core.selection import BoxSelector
from boxgame.core.state_snapshot import GameSnapshot, build_snapshot

PLAYER_A = "A"
PLAYER_B = "B"


@dataclass(frozen=True)
class GameResult:
    """Final outcome of a game."""
    score_a: float
    score_b: float
    turns: int
    events: Tuple[ScoreEvent, ...]

    @property
    def scores(self) -> Tuple[float, float]:
        return (self.score_a, self.score_b)

    @property
    def winner(self) -> str:
        """The player with the highest score, or "draw"."""
        if self.score_a > self.score_b:
            return PLAYER_A
        if self.score_b > self.score_a:
            return PLAYER_B
        return "draw"


class CoreGame:
    """
    Main game simulation class.

    Owns the four boxes and both players. Player A moves on even turns,
    player B on odd turns. One step = one token absorbed by the lightest box.
    """

    def __init__(self):
        self._selector = BoxSelector()
        self._boxes: List[Box] = []
        self._players: Tuple[Player, Player] = (Player(PLAYER_A), Player(PLAYER_B))
        self._turn: int = 0
        self._events: List[ScoreEvent] = []
        self.reset()

    @property
    def turn(self) -> int:
        """Number of turns played."""
        return self._turn

    @property
    def current_player(self) -> Player:
        """Player to move next."""
        return self._players[self._turn % 2]

    @property
    def player_a(self) -> Player:
        return self._players[0]

    @property
    def player_b(self) -> Player:
        return self._players[1]

    @property
    def scores(self) -> Tuple[float, float]:
        """(score A, score B)."""
        return (self._players[0].score, self._players[1].score)

    @property
    def boxes(self) -> Tuple[Box, ...]:
        """Live boxes in slot order (read-only view of the collection)."""
        return tuple(self._boxes)

    @property
    def events(self) -> Tuple[ScoreEvent, ...]:
        """All turns played so far."""
        return tuple(self._events)

    def reset(self) -> GameSnapshot:
        """
        Reset game to its initial state: fresh boxes, zero scores, A to move.

        Returns:
            Initial game snapshot.
        """
        self._boxes = build_boxes()
        for player in self._players:
            player.reset()
        self._turn = 0
        self._events = []
        return self.snapshot()

    def step(self, weight: int) -> ScoreEvent:
        """
        Play one turn for the player to move.

        Args:
            weight: Token weight consumed by this turn.

        Returns:
            ScoreEvent for the turn.
        """
        event = self.current_player.take_turn(
            weight,
            self._boxes,
            self._selector,
            turn=self._turn
        )
        self._events.append(event)
        self._turn += 1
        return event

    def run(self, weights: Iterable[int]) -> GameResult:
        """
        Play every weight in order and return the result.

        Args:
            weights: Input token weights.

        Returns:
            GameResult covering all turns played since the last reset.
        """
        for weight in weights:
            self.step(weight)
        return self.result()

    def result(self) -> GameResult:
        score_a, score_b = self.scores
        return GameResult(
            score_a=score_a,
            score_b=score_b,
            turns=self._turn,
            events=tuple(self._events)
        )

    def snapshot(self) -> GameSnapshot:
        """Build current game state snapshot."""
        score_a, score_b = self.scores
        return build_snapshot(
            self._boxes,
            turn=self._turn,
            next_player=self.current_player.name,
            score_a=score_a,
            score_b=score_b
        )


def play_game(weights: Iterable[int]) -> GameResult:
    """Play a fresh game and return the full result."""
    return CoreGame().run(weights)


def play(weights: Iterable[int]) -> Tuple[float, float]:
    """
    Play a fresh game over the given token weights.

    Args:
        weights: Non-negative integer token weights, one per turn.

    Returns:
        (score of player A, score of player B). (0.0, 0.0) for no input.
    """
    return play_game(weights).scores
