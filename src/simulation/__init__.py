"""
Simulation module for Minesweeper agents.

Provides repeated-game evaluation and statistics.
"""
from .evaluator import EpisodeStats, SimulationStats, Evaluator

__all__ = [
    "EpisodeStats",
    "SimulationStats",
    "Evaluator",
]
