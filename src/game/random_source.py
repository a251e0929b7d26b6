"""
Random sources for the Minesweeper engine.

Mine placement and the mine survival coin flip are the only sources of
non-determinism, so both go through an injected RandomSource.
"""
from typing import Iterable, Optional, Protocol, Union

import numpy as np


class ScriptExhaustedError(RuntimeError):
    """A scripted source ran out of values."""


class RandomSource(Protocol):
    """Randomness consumed by the board."""

    def randrange(self, bound: int) -> int:
        """Return a uniform integer in [0, bound)."""
        ...

    def coin_flip(self) -> bool:
        """Return True with probability 0.5."""
        ...


class NumpyRandomSource:
    """
    RandomSource backed by a numpy Generator.

    Args:
        seed: Seed for a fresh generator, or an existing Generator to
            share (e.g. a Gymnasium env's np_random).
    """

    def __init__(
        self, seed: Optional[Union[int, np.random.Generator]] = None
    ) -> None:
        if isinstance(seed, np.random.Generator):
            self.rng = seed
        else:
            self.rng = np.random.default_rng(seed)

    def randrange(self, bound: int) -> int:
        return int(self.rng.integers(0, bound))

    def coin_flip(self) -> bool:
        return bool(self.rng.integers(0, 2))


class ScriptedRandomSource:
    """
    RandomSource that replays fixed sequences.

    Integers are handed out in order by randrange and booleans by
    coin_flip. Running out of either is an error rather than a silent
    fallback to real randomness.
    """

    def __init__(
        self, ints: Iterable[int] = (), flips: Iterable[bool] = ()
    ) -> None:
        self._ints = list(ints)
        self._flips = list(flips)

    def randrange(self, bound: int) -> int:
        if not self._ints:
            raise ScriptExhaustedError("Scripted integers exhausted")
        value = self._ints.pop(0)
        if not 0 <= value < bound:
            raise ValueError(f"Scripted value {value} outside [0, {bound})")
        return value

    def coin_flip(self) -> bool:
        if not self._flips:
            raise ScriptExhaustedError("Scripted coin flips exhausted")
        return bool(self._flips.pop(0))

    @property
    def remaining(self) -> int:
        """Number of unused scripted values."""
        return len(self._ints) + len(self._flips)
