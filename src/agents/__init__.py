"""
Minesweeper agents module.

Provides automated players for the game:
- BaseAgent: Interface every agent implements
- RandomAgent: Baseline random selection
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent

__all__ = [
    "BaseAgent",
    "RandomAgent",
]
