"""
Evaluation Package
==================

Contains the seed bank and the command-line harness for running games.
"""

from boxgame.evaluation.run_eval import evaluate_seeds, load_seed_bank

__all__ = ["evaluate_seeds", "load_seed_bank"]
