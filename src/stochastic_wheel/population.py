"""Population helpers for fitness-proportional selection.

A population is any indexable sequence of objects that expose ``fitness()``.
This module provides:

- ScoredIndividual: A minimal immutable individual pairing a fitness with an
  arbitrary genome, for callers whose candidates lack a ``fitness()`` method
- scored_population: Build a list of ScoredIndividual from a fitness array
- as_fitness / fitness_of / fitness_array: Read fitness values as 32-bit floats
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from stochastic_wheel.exceptions import InvalidFitnessError
from stochastic_wheel.protocols import Individual


@dataclass(frozen=True)
class ScoredIndividual:
    """Immutable individual carrying a precomputed fitness.

    Attributes:
        fitness_value: Fitness as a 32-bit float.
        genome: Opaque payload (decision variables, tree, anything). Never
            inspected by the selector.

    Example:
        >>> ind = ScoredIndividual(fitness_value=2.5, genome=np.array([0.1, 0.9]))
        >>> ind.fitness()
        2.5
    """

    fitness_value: np.float32
    genome: Any = None

    def __post_init__(self) -> None:
        """Convert fitness_value to float32.

        Raises:
            InvalidFitnessError: If fitness_value is not numeric.
        """
        object.__setattr__(self, "fitness_value", as_fitness(self.fitness_value))

    def fitness(self) -> float:
        """Return the stored fitness."""
        return float(self.fitness_value)


def as_fitness(value: Any) -> np.float32:
    """Convert one fitness value to a 32-bit float.

    Args:
        value: A real scalar (Python or numpy int/float).

    Returns:
        value as np.float32. Values outside the float32 range become infinite.

    Raises:
        InvalidFitnessError: If value is a string, a bool, a non-scalar array or
            otherwise not convertible.
    """
    if isinstance(value, (str, bytes, bool, np.bool_)) or np.ndim(value) != 0:
        raise InvalidFitnessError(f"fitness must be a number, got {value!r}")
    try:
        with np.errstate(over="ignore"):
            return np.float32(value)
    except (TypeError, ValueError) as exc:
        raise InvalidFitnessError(f"fitness must be a number, got {value!r}") from exc


def fitness_of(individual: Individual) -> np.float32:
    """Read the fitness of one individual as a 32-bit float.

    Args:
        individual: Object exposing ``fitness()``.

    Returns:
        The fitness converted to np.float32. Values outside the float32 range
        become infinite.

    Raises:
        InvalidFitnessError: If ``fitness()`` returns something that is not a
            number.
    """
    return as_fitness(individual.fitness())


def fitness_array(population: Sequence[Individual]) -> np.ndarray:
    """Collect the fitness of every individual.

    Args:
        population: Sequence of individuals.

    Returns:
        Array of shape (len(population),) and dtype float32.

    Example:
        >>> pop = scored_population(np.array([2.0, 1.0, 4.0, 3.0]))
        >>> fitness_array(pop)
        array([2., 1., 4., 3.], dtype=float32)
    """
    return np.array([fitness_of(individual) for individual in population], dtype=np.float32)


def scored_population(fitness: np.ndarray, genomes: Sequence[Any] | None = None) -> list[ScoredIndividual]:
    """Build a population of ScoredIndividual from fitness values.

    Args:
        fitness: Fitness values, shape (n,).
        genomes: Optional payloads, one per fitness value. If None, each
            individual's genome is its position in the population.

    Returns:
        List of n ScoredIndividual in the same order as ``fitness``.

    Raises:
        ValueError: If fitness is not 1D or genomes has a different length.

    Example:
        >>> pop = scored_population(np.array([0.5, 1.5]), genomes=["a", "b"])
        >>> [ind.genome for ind in pop]
        ['a', 'b']
    """
    fitness = np.asarray(fitness)
    if fitness.ndim != 1:
        raise ValueError(f"fitness must be 1D, got shape {fitness.shape}")

    n = fitness.shape[0]
    if genomes is None:
        genomes = range(n)
    elif len(genomes) != n:
        raise ValueError(f"genomes has {len(genomes)} elements, expected {n} to match fitness")

    return [ScoredIndividual(fitness_value=f, genome=g) for f, g in zip(fitness, genomes)]
