"""
Board module for Minesweeper game.

Implements the game board with mine placement, neighbor counts,
cell opening with flood-fill, and the mine survival rule.
"""
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellRevealState
from .errors import ConfigError, RangeError
from .random_source import NumpyRandomSource, RandomSource, ScriptedRandomSource

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Result of a single reveal on the board."""

    ALREADY_OPEN = auto()
    OPENED = auto()
    SURVIVED_MINE = auto()
    EXPLODED = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 6
    height: int = 6
    num_mines: int = 8

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


DEFAULT_CONFIG = BoardConfig(6, 6, 8)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed and counted once at construction; after that the
    only mutation is opening cells. Cells are indexed [x][y].
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: RandomSource = field(default_factory=NumpyRandomSource, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _opened_count: int = 0
    _mines_survived: int = 0

    def __post_init__(self) -> None:
        """Build the grid, place mines and compute neighbor counts."""
        self.config._validate()
        self._init_grid()
        self._place_mines()
        self._calculate_neighbor_mines()

    @classmethod
    def with_mines(
        cls,
        width: int,
        height: int,
        mines: Iterable[Position],
        rng: Optional[RandomSource] = None,
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions of the mines.
            rng: Source for later survival coin flips.

        Returns:
            Board with exactly the given mines.
        """
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ConfigError("Duplicate mine positions")
        config = BoardConfig(width, height, len(positions))
        draws: List[int] = []
        for x, y in positions:
            if not (0 <= x < width and 0 <= y < height):
                raise ConfigError(
                    f"Mine position ({x}, {y}) is off the board"
                )
            draws.extend((x, y))

        board = cls(config, ScriptedRandomSource(ints=draws))
        board.rng = rng if rng is not None else NumpyRandomSource()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.height)]
            for _ in range(self.config.width)
        ]

    def _place_mines(self) -> None:
        """Draw random cells with replacement until num_mines are mined."""
        placed = 0
        draws = 0
        while placed < self.config.num_mines:
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            draws += 1
            cell = self._grid[x][y]
            if not cell.has_mine:
                cell.has_mine = True
                placed += 1
        logger.debug(
            "Placed %d mines on %dx%d board in %d draws",
            placed, self.config.width, self.config.height, draws,
        )

    def _calculate_neighbor_mines(self) -> None:
        """Calculate neighbor mine counts for all safe cells."""
        for x in range(self.config.width):
            for y in range(self.config.height):
                if not self._grid[x][y].has_mine:
                    count = self._count_neighbor_mines(x, y)
                    self._grid[x][y].neighbor_mines = count

    def _count_neighbor_mines(self, x: int, y: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_x, neighbor_y in self.neighbors(x, y):
            if self._grid[neighbor_x][neighbor_y].has_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the up to 8 in-range neighbors.
        """
        neighbors = []
        for delta_x in (-1, 0, 1):
            for delta_y in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_position(self, x: int, y: int) -> None:
        if not self.is_valid_position(x, y):
            raise RangeError(
                f"Position ({x}, {y}) outside "
                f"{self.config.width}x{self.config.height} board"
            )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(
        self, x: int, y: int, rng: Optional[RandomSource] = None
    ) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A mine survives or detonates on a coin flip from rng. A safe
        cell with no neighboring mines opens its whole zero region and
        the numbered cells bordering it.

        Args:
            x: Column to reveal.
            y: Row to reveal.
            rng: Source for the survival coin flip (default: board rng).

        Returns:
            Outcome of the reveal.
        """
        self._check_position(x, y)
        cell = self._grid[x][y]
        if cell.is_opened:
            return RevealOutcome.ALREADY_OPEN

        if cell.has_mine:
            if rng is None:
                rng = self.rng
            return self._reveal_mine(cell, rng)

        if cell.neighbor_mines > 0:
            self._open(cell)
            return RevealOutcome.OPENED

        opened = self._flood_fill(x, y)
        logger.debug("Flood fill from (%d, %d) opened %d cells", x, y, opened)
        return RevealOutcome.OPENED

    def _reveal_mine(self, cell: Cell, rng: RandomSource) -> RevealOutcome:
        """Open a mine, surviving on heads."""
        survived = rng.coin_flip()
        cell.open(exploded=not survived)
        if survived:
            self._mines_survived += 1
            return RevealOutcome.SURVIVED_MINE
        return RevealOutcome.EXPLODED

    def _open(self, cell: Cell) -> None:
        if cell.open():
            self._opened_count += 1

    def _flood_fill(self, x: int, y: int) -> int:
        """
        Breadth-first open from a zero cell.

        Cells are opened as they are enqueued so each is visited once.
        Mines are never enqueued.

        Returns:
            Number of cells opened.
        """
        self._open(self._grid[x][y])
        queue = deque([(x, y)])
        opened = 1
        while queue:
            current_x, current_y = queue.popleft()
            if self._grid[current_x][current_y].neighbor_mines > 0:
                continue
            for neighbor_x, neighbor_y in self.neighbors(current_x, current_y):
                neighbor = self._grid[neighbor_x][neighbor_y]
                if neighbor.is_opened or neighbor.has_mine:
                    continue
                self._open(neighbor)
                opened += 1
                queue.append((neighbor_x, neighbor_y))
        return opened

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def is_won(self) -> bool:
        """Check if every safe cell is opened. Opened mines do not count."""
        for column in self._grid:
            for cell in column:
                if not cell.has_mine and not cell.is_opened:
                    return False
        return True

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def opened_count(self) -> int:
        """Number of safe cells opened so far."""
        return self._opened_count

    @property
    def mines_survived(self) -> int:
        """Number of mines opened without detonating."""
        return self._mines_survived

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at position."""
        self._check_position(x, y)
        return self._grid[x][y]

    def cell_state(self, x: int, y: int) -> CellRevealState:
        """Get the display state of the cell at position."""
        return self.get_cell(x, y).reveal_state

    def mine_positions(self) -> List[Position]:
        """(x, y) positions of every mine."""
        return [
            (x, y)
            for x in range(self.config.width)
            for y in range(self.config.height)
            if self._grid[x][y].has_mine
        ]

    def hidden_positions(self) -> List[Position]:
        """(x, y) positions of every cell not yet opened."""
        return [
            (x, y)
            for x in range(self.config.width)
            for y in range(self.config.height)
            if not self._grid[x][y].is_opened
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array of shape (height, width) indexed [y, x] where:
                -1 = hidden
                0-8 = opened with neighbor count
                9 = exploded mine
                10 = survived mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x in range(self.config.width):
            for y in range(self.config.height):
                obs[y, x] = self._grid[x][y].to_observation()
        return obs
