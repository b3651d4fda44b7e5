"""Roulette wheel (fitness-proportionate) selection via stochastic acceptance.

Selection probability is proportional to fitness (higher is better):

    p_i = f_i / Σ(f_j)

Instead of building a cumulative table, each draw picks a candidate uniformly
and accepts it with probability f_i / max(f). Rejected candidates are simply
redrawn. The expected number of draws per selection is max(f) / mean(f), and
the only per-generation setup is a single scan for the maximum fitness.

Reference: Lipowski & Lipowska, "Roulette-wheel selection via stochastic
acceptance", Physica A 391 (2012).
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

import numpy as np

from stochastic_wheel.exceptions import (
    DegenerateFitnessError,
    DrawLimitExceededError,
    EmptyPopulationError,
    InvalidFitnessError,
)
from stochastic_wheel.population import as_fitness, fitness_of
from stochastic_wheel.protocols import Individual, RandomSource
from stochastic_wheel.rng import SeedLike, as_random_source, require_random_source

logger = logging.getLogger(__name__)

I = TypeVar("I", bound=Individual)  # noqa: E741


@dataclass(frozen=True)
class RouletteWheelSelection:
    """Stateless roulette wheel selection policy.

    The policy holds no data; call ``init`` once per generation to obtain a
    selector for that generation's population.

    Example:
        >>> policy = RouletteWheelSelection()
        >>> pop = scored_population(np.array([2.0, 1.0, 4.0, 3.0]))
        >>> selector = policy.init(pop)
        >>> selector.max_fitness
        np.float32(4.0)
    """

    def init(self, population: Sequence[Individual]) -> "RouletteWheelSelector":
        """Build a selector for the given population.

        Args:
            population: Non-empty sequence of individuals.

        Returns:
            A RouletteWheelSelector holding the population's maximum fitness.

        Raises:
            EmptyPopulationError: If population is empty.
            InvalidFitnessError: If any fitness is NaN, infinite, negative or
                not numeric.
            DegenerateFitnessError: If every fitness is zero.
        """
        return RouletteWheelSelector.from_population(population)


@dataclass(frozen=True)
class RouletteWheelSelector:
    """Per-generation roulette wheel selector.

    Holds only the maximum fitness of the population it was built from. It
    does not keep a reference to that population; the same population must
    be passed to every ``select`` call.

    Attributes:
        max_fitness: Largest fitness in the population, as a 32-bit float.
            Always finite and strictly positive.
    """

    max_fitness: np.float32

    def __post_init__(self) -> None:
        """Validate and normalize max_fitness.

        Raises:
            InvalidFitnessError: If max_fitness is NaN, infinite, negative or not
                a number.
            DegenerateFitnessError: If max_fitness is zero.
        """
        max_fitness = as_fitness(self.max_fitness)
        if not np.isfinite(max_fitness):
            raise InvalidFitnessError(f"max_fitness must be finite, got {max_fitness}")
        if max_fitness < 0:
            raise InvalidFitnessError(f"max_fitness must be non-negative, got {max_fitness}")
        if max_fitness == 0:
            raise DegenerateFitnessError(
                "max_fitness is zero; every individual has zero fitness, so selection probabilities are undefined"
            )
        object.__setattr__(self, "max_fitness", max_fitness)

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> "RouletteWheelSelector":
        """Scan a population for its maximum fitness.

        Args:
            population: Non-empty sequence of individuals.

        Returns:
            A selector for this population.

        Raises:
            EmptyPopulationError: If population is empty.
            InvalidFitnessError: If any fitness is NaN, infinite, negative or
                not numeric.
            DegenerateFitnessError: If every fitness is zero.
        """
        if len(population) == 0:
            raise EmptyPopulationError("cannot build a selector from an empty population")

        max_fitness = np.float32(0.0)
        for i, individual in enumerate(population):
            fitness = fitness_of(individual)
            if not np.isfinite(fitness):
                raise InvalidFitnessError(f"individual {i} has non-finite fitness {fitness}")
            if fitness < 0:
                raise InvalidFitnessError(f"individual {i} has negative fitness {fitness}")
            if fitness > max_fitness:
                max_fitness = fitness

        if max_fitness == 0:
            raise DegenerateFitnessError(
                f"all {len(population)} individuals have zero fitness, so selection probabilities are undefined"
            )

        logger.debug("Built roulette wheel selector: n=%d, max_fitness=%s", len(population), max_fitness)
        return cls(max_fitness=max_fitness)

    def acceptance_probability(self, individual: Individual) -> float:
        """Probability with which a drawn candidate is accepted.

        The ratio is computed in single precision and widened to a Python
        float afterwards.

        Args:
            individual: Candidate drawn from the population.

        Returns:
            fitness / max_fitness, in [0, 1].

        Raises:
            InvalidFitnessError: If the candidate's fitness is NaN, negative or
                exceeds max_fitness (the population changed since the selector
                was built).
        """
        fitness = fitness_of(individual)
        if np.isnan(fitness) or fitness < 0:
            raise InvalidFitnessError(f"candidate has invalid fitness {fitness}")
        if fitness > self.max_fitness:
            raise InvalidFitnessError(
                f"candidate fitness {fitness} exceeds max_fitness {self.max_fitness}; "
                "the population changed since the selector was built"
            )
        return float(fitness / self.max_fitness)

    def select_index(
        self,
        population: Sequence[Individual],
        rng: RandomSource | np.random.Generator,
        max_draws: int | None = None,
    ) -> int:
        """Select the position of one individual, proportional to fitness.

        Each draw picks a position uniformly and accepts it with probability
        ``acceptance_probability``. The fittest individual is accepted as soon
        as it is drawn. Every draw, accepted or rejected, advances rng.

        Args:
            population: The population this selector was built from.
            rng: Randomness source or numpy Generator. Its state carries over
                between calls, so seeds are refused.
            max_draws: Give up after this many rejected candidates. None
                (default) keeps drawing until one is accepted.

        Returns:
            Index into population. Only meaningful for this exact population.

        Raises:
            EmptyPopulationError: If population is empty.
            InvalidFitnessError: If a drawn candidate's fitness is invalid.
            DrawLimitExceededError: If max_draws candidates were all rejected.
            ValueError: If max_draws is not positive.
            TypeError: If rng is a seed or None rather than a source.
        """
        if max_draws is not None and max_draws < 1:
            raise ValueError(f"max_draws must be positive, got {max_draws}")

        n = len(population)
        if n == 0:
            raise EmptyPopulationError("cannot select from an empty population")

        rng = require_random_source(rng)
        positions = range(n)
        draws = 0

        while max_draws is None or draws < max_draws:
            draws += 1
            idx = rng.choose_uniform(positions)
            if rng.bernoulli(self.acceptance_probability(population[idx])):
                return idx

        logger.warning("No candidate accepted after %d draws (max_fitness=%s)", draws, self.max_fitness)
        raise DrawLimitExceededError(draws)

    def select(
        self,
        population: Sequence[I],
        rng: RandomSource | np.random.Generator,
        max_draws: int | None = None,
    ) -> I:
        """Select one individual, proportional to fitness.

        Same draw loop as ``select_index``; returns the individual itself
        rather than its position.

        Args:
            population: The population this selector was built from.
            rng: Randomness source or numpy Generator, see ``select_index``.
            max_draws: Optional cap on draws, see ``select_index``.

        Returns:
            The selected individual (the object stored in population).

        Example:
            >>> pop = scored_population(np.array([2.0, 1.0, 4.0, 3.0]))
            >>> selector = RouletteWheelSelection().init(pop)
            >>> rng = NumpyRandomSource(42)
            >>> selector.select(pop, rng) in pop
            True
        """
        return population[self.select_index(population, rng, max_draws=max_draws)]

    def select_indices(
        self,
        population: Sequence[Individual],
        rng: RandomSource | SeedLike,
        n: int,
        max_draws: int | None = None,
    ) -> np.ndarray:
        """Select n parent indices with replacement.

        Args:
            population: The population this selector was built from.
            rng: Randomness source, or a numpy Generator / seed to wrap.
            n: Number of selections.
            max_draws: Optional cap on draws per selection.

        Returns:
            Array of shape (n,) and dtype np.intp.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")

        rng = as_random_source(rng)
        selected = np.empty(n, dtype=np.intp)
        for i in range(n):
            selected[i] = self.select_index(population, rng, max_draws=max_draws)
        return selected
