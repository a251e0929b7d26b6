"""
Unit tests for random sources.
"""
import numpy as np
import pytest
from game import (
    NumpyRandomSource,
    ScriptedRandomSource,
    ScriptExhaustedError,
    StateError,
)


class TestNumpyRandomSource:
    """Test the numpy-backed source."""

    def test_randrange_within_bound(self) -> None:
        """Values should fall in [0, bound)."""
        source = NumpyRandomSource(0)
        values = [source.randrange(6) for _ in range(200)]
        assert min(values) >= 0
        assert max(values) < 6

    def test_same_seed_same_sequence(self) -> None:
        """Equal seeds should give equal draws."""
        first = NumpyRandomSource(42)
        second = NumpyRandomSource(42)
        assert [first.randrange(100) for _ in range(20)] == [
            second.randrange(100) for _ in range(20)
        ]

    def test_coin_flip_returns_bool(self) -> None:
        """Coin flips should be plain booleans and hit both sides."""
        source = NumpyRandomSource(3)
        flips = [source.coin_flip() for _ in range(200)]
        assert all(isinstance(flip, bool) for flip in flips)
        assert set(flips) == {True, False}

    def test_wraps_existing_generator(self) -> None:
        """An existing Generator should be shared, not copied."""
        generator = np.random.default_rng(5)
        source = NumpyRandomSource(generator)
        assert source.rng is generator


class TestScriptedRandomSource:
    """Test the scripted source."""

    def test_replays_ints_in_order(self) -> None:
        """Integers come back in the scripted order."""
        source = ScriptedRandomSource(ints=[3, 1, 4])
        assert [source.randrange(5) for _ in range(3)] == [3, 1, 4]

    def test_replays_flips_in_order(self) -> None:
        """Flips come back in the scripted order."""
        source = ScriptedRandomSource(flips=[True, False])
        assert source.coin_flip() is True
        assert source.coin_flip() is False

    def test_exhausted_ints_raise(self) -> None:
        """Running out of integers is an error."""
        source = ScriptedRandomSource()
        with pytest.raises(ScriptExhaustedError, match="exhausted"):
            source.randrange(3)

    def test_exhausted_flips_raise(self) -> None:
        """Running out of flips is an error."""
        source = ScriptedRandomSource()
        with pytest.raises(ScriptExhaustedError, match="exhausted"):
            source.coin_flip()

    def test_exhaustion_is_not_a_game_state_error(self) -> None:
        """Running dry is a scripting problem, not a game state problem."""
        source = ScriptedRandomSource()
        with pytest.raises(ScriptExhaustedError) as excinfo:
            source.coin_flip()
        assert not isinstance(excinfo.value, StateError)
        assert isinstance(excinfo.value, RuntimeError)

    def test_out_of_bound_value_raises(self) -> None:
        """A scripted value outside the bound is rejected."""
        source = ScriptedRandomSource(ints=[7])
        with pytest.raises(ValueError, match="outside"):
            source.randrange(5)

    def test_remaining_counts_unused_values(self) -> None:
        """Remaining tracks both sequences."""
        source = ScriptedRandomSource(ints=[0, 1], flips=[True])
        source.randrange(2)
        assert source.remaining == 2
