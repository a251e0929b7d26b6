"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the GameController.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, DEFAULT_CONFIG
from .cell import EXPLODED_CODE, HIDDEN_CODE, SURVIVED_CODE
from .controller import GameController, GameEvent, GameState
from .random_source import NumpyRandomSource


# ============================================================================
# Text Rendering
# ============================================================================

def render_ansi(observation: np.ndarray) -> str:
    """
    Render an observation as ASCII text, one board row per line.

    Hidden cells are '.', blanks ' ', mines '*' (exploded) or
    '!' (survived), numbers as digits.
    """
    lines = []
    for row in observation:
        row_str = ""
        for val in row:
            if val == HIDDEN_CODE:
                row_str += "."
            elif val == EXPLODED_CODE:
                row_str += "*"
            elif val == SURVIVED_CODE:
                row_str += "!"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper with mine survival.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - 0-8 = opened cell with neighbor mine count
        - 9 = exploded mine
        - 10 = survived mine

    Actions:
        Discrete action space of size width * height.
        Action i corresponds to cell (x, y) = (i % width, i // width).

    Rewards:
        - +1 for opening a safe cell
        - -1 for surviving a mine
        - +10 for winning the game
        - -10 for an exploding mine
        - -0.1 for invalid action (already opened)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 6x6 with 8 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT_CONFIG
        self.render_mode = render_mode
        self.controller = GameController(self.config)

        self.observation_space = spaces.Box(
            low=HIDDEN_CODE,
            high=SURVIVED_CODE,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.controller = GameController(
            self.config, NumpyRandomSource(self.np_random)
        )
        self._steps = 0
        return self.controller.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (y * width + x).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        x, y = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(x, y)
        observation = self.controller.board.get_observation()
        terminated = not self.controller.is_playing

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (x, y) position."""
        return int(action) % self.config.width, int(action) // self.config.width

    def _calculate_reward(self, x: int, y: int) -> float:
        """Reveal (x, y) and score the result."""
        if self.controller.board.get_cell(x, y).is_opened:
            return -0.1

        event = self.controller.reveal(x, y)
        if event == GameEvent.VICTORY:
            return 10.0
        if event == GameEvent.GAME_OVER:
            return -10.0
        if event == GameEvent.SURVIVED:
            return -1.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.controller.board
        return {
            "steps": self._steps,
            "opened": board.opened_count,
            "total_safe": self.config.safe_cells,
            "mines_survived": board.mines_survived,
            "game_state": self.controller.state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_ansi(self.controller.board.get_observation())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.controller.state != GameState.PLAYING:
            return mask
        for x, y in self.controller.board.hidden_positions():
            mask[y * self.config.width + x] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.
        asynchronous: Run each env in its own process.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
