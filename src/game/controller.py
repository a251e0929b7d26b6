"""
Game controller for Minesweeper.

Runs one game at a time on a Board: dispatches reveals, turns reveal
outcomes into events for the presentation layer, and replaces the
board when a game ends.
"""
import logging
from enum import Enum, auto
from typing import Optional

from .board import Board, BoardConfig, DEFAULT_CONFIG, RevealOutcome
from .errors import StateError
from .random_source import NumpyRandomSource, RandomSource

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class GameEvent(Enum):
    """What the presentation layer should announce after a reveal."""

    NONE = auto()
    SURVIVED = auto()
    GAME_OVER = auto()
    VICTORY = auto()


class GameController:
    """
    State machine around a single Board.

    A finished game stays in LOST or WON until the collaborator calls
    acknowledge(), which starts the next game. start_new_game() may be
    called at any time to restart.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """
        Initialize the controller and deal the first board.

        Args:
            config: Board configuration (default: 6x6 with 8 mines).
            rng: Random source shared by every board of the session.
        """
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or NumpyRandomSource()
        self.games_played = 0
        self.wins = 0
        self.losses = 0
        self.board = Board(self.config, self.rng)
        self._state = GameState.PLAYING

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state == GameState.PLAYING

    def start_new_game(self) -> Board:
        """Replace the board with a fresh one and resume playing."""
        self.board = Board(self.config, self.rng)
        self._state = GameState.PLAYING
        logger.info("New game started")
        return self.board

    def reveal(self, x: int, y: int) -> GameEvent:
        """
        Reveal a cell and report what happened.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Event for the presentation layer.

        Raises:
            StateError: The current game is already over.
            RangeError: Coordinates are off the board.
        """
        if self._state != GameState.PLAYING:
            raise StateError(f"Cannot reveal while game is {self._state.name}")

        outcome = self.board.reveal(x, y)

        if outcome == RevealOutcome.EXPLODED:
            self._finish(GameState.LOST)
            logger.info("Mine at (%d, %d) exploded", x, y)
            return GameEvent.GAME_OVER
        if outcome == RevealOutcome.SURVIVED_MINE:
            logger.info("Survived mine at (%d, %d)", x, y)
            return GameEvent.SURVIVED
        if outcome == RevealOutcome.OPENED and self.board.is_won():
            self._finish(GameState.WON)
            logger.info("All safe cells opened")
            return GameEvent.VICTORY
        return GameEvent.NONE

    def acknowledge(self) -> Board:
        """
        Accept the end of the current game and start the next one.

        Raises:
            StateError: The current game has not ended.
        """
        if self._state == GameState.PLAYING:
            raise StateError("No finished game to acknowledge")
        return self.start_new_game()

    def _finish(self, state: GameState) -> None:
        logger.debug("Game state %s -> %s", self._state.name, state.name)
        self._state = state
        self.games_played += 1
        if state == GameState.WON:
            self.wins += 1
        else:
            self.losses += 1
