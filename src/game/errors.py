"""
Error types raised by the Minesweeper engine.

Each error also subclasses the closest builtin so callers that only
know about ValueError/IndexError/RuntimeError still catch it.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class ConfigError(MinesweeperError, ValueError):
    """Board configuration cannot produce a playable board."""


class RangeError(MinesweeperError, IndexError):
    """Coordinates fall outside the board."""


class StateError(MinesweeperError, RuntimeError):
    """Operation is not valid in the current game state."""
