"""
Random agent for Minesweeper.

Serves as a baseline by opening random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects hidden cells uniformly at random.

    This provides a baseline for how often blind play clears a board
    when half of the mines are duds.
    """

    def __init__(
        self,
        board_width: int = 6,
        board_height: int = 6,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_width: Number of columns in the board.
            board_height: Number of rows in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_width, board_height)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # Nothing hidden; any index is a no-op reveal
            return 0

        return int(self.rng.choice(valid_indices))
