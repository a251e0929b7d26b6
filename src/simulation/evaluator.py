"""
Simulation module for Minesweeper agents.

Plays many games with an agent and aggregates the results.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from agents.base_agent import BaseAgent
from game.board import BoardConfig, DEFAULT_CONFIG
from game.environment import MinesweeperEnv

logger = logging.getLogger(__name__)


# ============================================================================
# Simulation Statistics
# ============================================================================

@dataclass
class EpisodeStats:
    """Statistics for a single game."""

    total_reward: float = 0.0
    steps: int = 0
    won: bool = False
    opened_cells: int = 0
    mines_survived: int = 0


@dataclass
class SimulationStats:
    """Accumulated statistics over many games."""

    episodes: List[EpisodeStats] = field(default_factory=list)

    @property
    def games(self) -> int:
        return len(self.episodes)

    @property
    def wins(self) -> int:
        return sum(1 for episode in self.episodes if episode.won)

    @property
    def win_rate(self) -> float:
        if not self.episodes:
            return 0.0
        return self.wins / self.games

    def _mean(self, attr: str) -> float:
        if not self.episodes:
            return 0.0
        return sum(getattr(e, attr) for e in self.episodes) / self.games

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "games": self.games,
            "wins": self.wins,
            "win_rate": self.win_rate,
            "avg_reward": self._mean("total_reward"),
            "avg_steps": self._mean("steps"),
            "avg_opened": self._mean("opened_cells"),
            "avg_mines_survived": self._mean("mines_survived"),
        }


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Evaluate agents over repeated games.

    Each game runs in a MinesweeperEnv until it is won, lost, or
    max_steps is reached.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration for evaluation.
            num_episodes: Number of games to play.
            max_steps: Maximum steps per game.
            seed: Seed for the first game; later games continue the
                same random stream.
        """
        self.board_config = board_config or DEFAULT_CONFIG
        self.num_episodes = num_episodes
        self.max_steps = max_steps
        self.seed = seed

    def run(self, agent: BaseAgent) -> SimulationStats:
        """Play num_episodes games with agent."""
        env = MinesweeperEnv(config=self.board_config)
        stats = SimulationStats()

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            stats.episodes.append(self._run_episode(env, agent, seed))

        logger.info(
            "Played %d games: %d wins", stats.games, stats.wins
        )
        return stats

    def _run_episode(
        self, env: MinesweeperEnv, agent: BaseAgent, seed: Optional[int]
    ) -> EpisodeStats:
        observation, info = env.reset(seed=seed)
        agent.reset()
        episode = EpisodeStats()

        for _ in range(self.max_steps):
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)
            episode.total_reward += float(reward)
            episode.steps += 1
            if terminated or truncated:
                break

        episode.won = info["game_state"] == "WON"
        episode.opened_cells = info["opened"]
        episode.mines_survived = info["mines_survived"]
        return episode

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Dictionary with evaluation metrics.
        """
        return self.run(agent).to_dict()

    def compare(
        self, agents: Dict[str, BaseAgent]
    ) -> Dict[str, Dict[str, float]]:
        """
        Compare multiple agents.

        Args:
            agents: Dictionary of agent_name -> agent.

        Returns:
            Dictionary of agent_name -> evaluation metrics.
        """
        results = {}
        for name, agent in agents.items():
            print(f"Evaluating {name}...")
            results[name] = self.evaluate(agent)
        return results
