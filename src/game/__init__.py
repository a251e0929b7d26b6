"""
Minesweeper game module.

Provides the board engine with mine survival, the game controller,
and a Gymnasium environment over them.
"""
from .cell import Cell, CellRevealState
from .board import Board, BoardConfig, RevealOutcome, DEFAULT_CONFIG
from .controller import GameController, GameEvent, GameState
from .errors import ConfigError, MinesweeperError, RangeError, StateError
from .random_source import (
    NumpyRandomSource,
    RandomSource,
    ScriptedRandomSource,
    ScriptExhaustedError,
)
from .environment import MinesweeperEnv, make_vec_env, render_ansi

__all__ = [
    "Cell",
    "CellRevealState",
    "Board",
    "BoardConfig",
    "RevealOutcome",
    "DEFAULT_CONFIG",
    "GameController",
    "GameEvent",
    "GameState",
    "ConfigError",
    "MinesweeperError",
    "RangeError",
    "StateError",
    "NumpyRandomSource",
    "RandomSource",
    "ScriptedRandomSource",
    "ScriptExhaustedError",
    "MinesweeperEnv",
    "make_vec_env",
    "render_ansi",
]
