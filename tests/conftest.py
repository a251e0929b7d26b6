"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Repository root, for the command-line entry point
sys.path.insert(0, str(Path(__file__).parent.parent))

from game import (  # noqa: E402
    Board,
    BoardConfig,
    Cell,
    GameController,
    NumpyRandomSource,
)


# ============================================================================
# Board Layouts
# ============================================================================

# 6x6, mines on the right edge, rows are y, columns are x:
#
#     x: 0 1 2 3 4 5
#   y=0  . . . 2 * *
#   y=1  . . . 2 * 4
#   y=2  . . . 1 2 *
#   y=3  . . . 1 3 3
#   y=4  . . . 2 * *
#   y=5  . . . 2 * *
LAYOUT_MINES = [(4, 0), (5, 0), (4, 1), (5, 2), (4, 4), (5, 4), (4, 5), (5, 5)]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 6x6 board with 8 mines."""
    return Board(rng=NumpyRandomSource(7))


@pytest.fixture
def layout_board() -> Board:
    """Create the fixed 6x6 layout above."""
    return Board.with_mines(6, 6, LAYOUT_MINES)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 3x3 board with one mine at (0, 0)."""
    return Board.with_mines(3, 3, [(0, 0)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an opened cell with neighboring mines."""
    cell = Cell(neighbor_mines=3)
    cell.open()
    return cell


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def controller() -> GameController:
    """Controller on the default configuration with a seeded source."""
    return GameController(rng=NumpyRandomSource(1234))


@pytest.fixture
def layout_controller(layout_board: Board) -> GameController:
    """Controller whose current board is the fixed layout."""
    game = GameController(rng=NumpyRandomSource(1234))
    game.board = layout_board
    return game
