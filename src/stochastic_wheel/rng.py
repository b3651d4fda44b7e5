"""NumPy-backed randomness source.

NumpyRandomSource adapts ``numpy.random.Generator`` to the RandomSource
protocol. Seeding two sources with the same value reproduces the same draws,
which keeps selection runs deterministic.

Generators are not thread-safe. Give every worker its own source, for example
via ``NumpyRandomSource.spawn``.
"""

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from stochastic_wheel.protocols import RandomSource

T = TypeVar("T")

SeedLike = int | np.random.SeedSequence | np.random.Generator | None


class NumpyRandomSource:
    """RandomSource implementation on top of numpy.random.Generator.

    Args:
        seed: Seed for a new PCG64 generator, or an existing Generator to wrap
            (shared, not copied). None draws fresh entropy from the OS.

    Example:
        >>> rng = NumpyRandomSource(42)
        >>> rng.choose_uniform(["a", "b", "c"]) in {"a", "b", "c"}
        True
        >>> rng.bernoulli(1.0)
        True
    """

    def __init__(self, seed: SeedLike = None) -> None:
        if isinstance(seed, np.random.Generator):
            self.generator = seed
        else:
            self.generator = np.random.default_rng(seed)

    def choose_uniform(self, sequence: Sequence[T]) -> T:
        """Return one element of sequence chosen uniformly at random.

        Raises:
            ValueError: If sequence is empty.
        """
        n = len(sequence)
        if n == 0:
            raise ValueError("cannot choose from an empty sequence")
        return sequence[int(self.generator.integers(n))]

    def bernoulli(self, probability: float) -> bool:
        """Return True with the given probability.

        Raises:
            ValueError: If probability is NaN or outside [0, 1].
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be in [0, 1], got {probability}")
        return bool(self.generator.random() < probability)

    def spawn(self, n: int) -> list["NumpyRandomSource"]:
        """Create n independent child sources.

        Children are derived deterministically from this source's state, so a
        seeded parent always yields the same children. Use one child per
        worker thread.

        Args:
            n: Number of children.

        Returns:
            List of n new NumpyRandomSource instances.
        """
        return [NumpyRandomSource(child) for child in self.generator.spawn(n)]


def as_random_source(rng: RandomSource | SeedLike) -> RandomSource:
    """Coerce rng into a RandomSource.

    Objects that already satisfy RandomSource are returned unchanged. A
    numpy Generator is wrapped; an int, SeedSequence or None seeds a new
    NumpyRandomSource.

    Args:
        rng: RandomSource, numpy Generator, seed, or None.

    Returns:
        A RandomSource.
    """
    if isinstance(rng, RandomSource):
        return rng
    return NumpyRandomSource(rng)


def require_random_source(rng: RandomSource | np.random.Generator) -> RandomSource:
    """Coerce rng into a RandomSource whose state persists across calls.

    Unlike ``as_random_source``, seeds are refused: a seed passed to a
    single-draw call would build a fresh generator every time, so repeated
    calls would replay the same draws.

    Args:
        rng: RandomSource or numpy Generator.

    Returns:
        A RandomSource.

    Raises:
        TypeError: If rng is a seed, None, or any other object.
    """
    if isinstance(rng, RandomSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(rng)
    raise TypeError(
        f"rng must be a RandomSource or numpy Generator, got {type(rng).__name__}; "
        "seeds are only accepted by select_indices"
    )
