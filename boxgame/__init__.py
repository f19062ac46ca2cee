"""
Box Game
========

A deterministic two-player game over four scoring boxes.

- core: boxes, selection, players, the game loop, config and replays
- evaluation: command-line harness for scenarios and seed banks

The scoring rules and the box layout are fixed; game_config.yaml only
controls generated input sequences, console output and named scenarios.
"""
