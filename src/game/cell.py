"""
Cell module for Minesweeper game.

Represents individual cells on the game board: whether they hold a
mine, their neighbor count, and whether they have been opened.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellRevealState(Enum):
    """What a presentation layer should draw for a cell."""

    HIDDEN = auto()
    NUMBER = auto()
    BLANK = auto()
    MINE_SURVIVED = auto()
    MINE_EXPLODED = auto()


# Observation codes for opened mines; safe cells use their count (0-8)
HIDDEN_CODE = -1
EXPLODED_CODE = 9
SURVIVED_CODE = 10


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        has_mine: Whether this cell contains a mine.
        neighbor_mines: Count of mines in neighboring cells (0-8),
            meaningful only when has_mine is False.
        is_opened: Whether the cell has been opened. Never reverts.
        exploded: For an opened mine, whether it detonated.
    """

    has_mine: bool = False
    neighbor_mines: int = 0
    is_opened: bool = False
    exploded: bool = False

    def open(self, exploded: bool = False) -> bool:
        """
        Open this cell.

        Args:
            exploded: Mark an opened mine as detonated.

        Returns:
            True if the cell was opened, False if it was already open.
        """
        if self.is_opened:
            return False
        self.is_opened = True
        self.exploded = self.has_mine and exploded
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is still closed."""
        return not self.is_opened

    @property
    def reveal_state(self) -> CellRevealState:
        """Derived display state of the cell."""
        if not self.is_opened:
            return CellRevealState.HIDDEN
        if self.has_mine:
            if self.exploded:
                return CellRevealState.MINE_EXPLODED
            return CellRevealState.MINE_SURVIVED
        if self.neighbor_mines > 0:
            return CellRevealState.NUMBER
        return CellRevealState.BLANK

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            0-8: Opened safe cell with neighbor mine count
            9: Opened mine that exploded
            10: Opened mine that was survived
        """
        if not self.is_opened:
            return HIDDEN_CODE
        if self.has_mine:
            return EXPLODED_CODE if self.exploded else SURVIVED_CODE
        return self.neighbor_mines
