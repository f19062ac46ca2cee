"""
Box Game Core - The scoring and selection engine.

Main exports:
- play: Play a game and return (score A, score B)
- play_game: Play a game and return the full GameResult
- CoreGame: Stepwise game simulation
- WindowedMeanBox / MinMaxPairingBox: Green and blue boxes
- BoxSelector: Lightest-box selection rule
- GameConfig: Configuration loaded from game_config.yaml
"""

from boxgame.core.config_loader import GameConfig, load_config
from boxgame.core.boxes import (
    Box,
    BoxKind,
    WindowedMeanBox,
    MinMaxPairingBox,
    cantor_pairing,
)
from boxgame.core.box_catalog import BoxSpec, STANDARD_LAYOUT, build_boxes
from boxgame.core.selection import BoxSelector
from boxgame.core.scoring import Player, ScoreEvent
from boxgame.core.game import CoreGame, GameResult, play, play_game
from boxgame.core.state_snapshot import GameSnapshot
from boxgame.core.rng import WeightSequence, generate_weights
from boxgame.core.replay_recorder import (
    ReplayRecorder,
    record_game,
    load_replay,
    verify_replay,
)

__all__ = [
    "GameConfig",
    "load_config",
    "Box",
    "BoxKind",
    "WindowedMeanBox",
    "MinMaxPairingBox",
    "cantor_pairing",
    "BoxSpec",
    "STANDARD_LAYOUT",
    "build_boxes",
    "BoxSelector",
    "Player",
    "ScoreEvent",
    "CoreGame",
    "GameResult",
    "play",
    "play_game",
    "GameSnapshot",
    "WeightSequence",
    "generate_weights",
    "ReplayRecorder",
    "record_game",
    "load_replay",
    "verify_replay",
]
