"""
Unit tests for agents and the simulation evaluator.
"""
import numpy as np
import pytest
from agents import BaseAgent, RandomAgent
from game import BoardConfig
from simulation import EpisodeStats, Evaluator, SimulationStats


# ============================================================================
# Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test the random baseline."""

    def test_picks_only_valid_actions(self) -> None:
        """Chosen actions always come from the mask."""
        agent = RandomAgent(3, 2, seed=0)
        mask = np.array([False, True, False, False, True, False])
        obs = np.full((2, 3), -1, dtype=np.int8)
        for _ in range(50):
            assert agent.select_action(obs, mask) in (1, 4)

    def test_mask_from_observation(self) -> None:
        """Without a mask, hidden cells are the valid actions."""
        agent = RandomAgent(2, 2, seed=0)
        obs = np.array([[0, 1], [-1, 10]], dtype=np.int8)
        assert agent.select_action(obs) == 2

    def test_no_valid_actions_returns_zero(self) -> None:
        """Fully opened boards fall back to action 0."""
        agent = RandomAgent(2, 2, seed=0)
        obs = np.zeros((2, 2), dtype=np.int8)
        assert agent.select_action(obs) == 0

    def test_position_round_trip(self) -> None:
        """Action indices map to (x, y) and back."""
        agent = RandomAgent(4, 3)
        assert agent.action_to_position(6) == (2, 1)
        assert agent.position_to_action(2, 1) == 6

    def test_is_base_agent(self) -> None:
        """Random agent implements the base interface."""
        assert isinstance(RandomAgent(), BaseAgent)


# ============================================================================
# Statistics Tests
# ============================================================================

class TestSimulationStats:
    """Test aggregation of episode results."""

    def test_empty_stats(self) -> None:
        """No games means zero rates, not division errors."""
        stats = SimulationStats()
        assert stats.win_rate == 0.0
        assert stats.to_dict()["avg_steps"] == 0.0

    def test_aggregates(self) -> None:
        """Means and win rate cover every episode."""
        stats = SimulationStats(
            episodes=[
                EpisodeStats(total_reward=10.0, steps=4, won=True,
                             opened_cells=28, mines_survived=1),
                EpisodeStats(total_reward=-8.0, steps=2, won=False,
                             opened_cells=3, mines_survived=0),
            ]
        )
        result = stats.to_dict()
        assert result["games"] == 2
        assert result["wins"] == 1
        assert result["win_rate"] == pytest.approx(0.5)
        assert result["avg_steps"] == pytest.approx(3.0)
        assert result["avg_mines_survived"] == pytest.approx(0.5)


# ============================================================================
# Evaluator Tests
# ============================================================================

class TestEvaluator:
    """Test repeated-game evaluation."""

    def test_plays_requested_games(self) -> None:
        """Every game ends as a win or a loss on a small board."""
        evaluator = Evaluator(
            BoardConfig(4, 4, 3), num_episodes=20, max_steps=16, seed=0
        )
        stats = evaluator.run(RandomAgent(4, 4, seed=0))
        assert stats.games == 20
        for episode in stats.episodes:
            assert 1 <= episode.steps <= 16
            assert episode.opened_cells <= 13

    def test_mine_free_board_always_wins(self) -> None:
        """With no mines the first reveal clears the board."""
        evaluator = Evaluator(BoardConfig(3, 3, 0), num_episodes=5, seed=1)
        result = evaluator.evaluate(RandomAgent(3, 3, seed=1))
        assert result["win_rate"] == 1.0
        assert result["avg_steps"] == 1.0

    def test_seeded_runs_repeat(self) -> None:
        """Same seeds give the same results."""
        config = BoardConfig(5, 5, 5)
        first = Evaluator(config, num_episodes=10, seed=3).evaluate(
            RandomAgent(5, 5, seed=3)
        )
        second = Evaluator(config, num_episodes=10, seed=3).evaluate(
            RandomAgent(5, 5, seed=3)
        )
        assert first == second

    def test_compare_reports_each_agent(self) -> None:
        """compare returns one result per named agent."""
        evaluator = Evaluator(BoardConfig(3, 3, 1), num_episodes=3, seed=0)
        results = evaluator.compare({
            "a": RandomAgent(3, 3, seed=0),
            "b": RandomAgent(3, 3, seed=1),
        })
        assert set(results) == {"a", "b"}
