"""stochastic-wheel: Fitness-proportional selection by stochastic acceptance.

Roulette wheel parent selection for genetic algorithms that never builds a
cumulative-probability table. A policy scans each generation once for its
maximum fitness; the resulting selector then draws candidates uniformly and
accepts each with probability fitness / max_fitness.

Example:
    >>> import numpy as np
    >>> from stochastic_wheel import NumpyRandomSource, RouletteWheelSelection, scored_population
    >>> pop = scored_population(np.array([2.0, 1.0, 4.0, 3.0]))
    >>> selector = RouletteWheelSelection().init(pop)
    >>> rng = NumpyRandomSource(42)
    >>> parents = selector.select_indices(pop, rng, n=10)
    >>> parents.shape
    (10,)

Example (any object with a fitness() method is selectable):
    >>> class Candidate:
    ...     def __init__(self, score):
    ...         self.score = score
    ...     def fitness(self):
    ...         return self.score
    >>> pop = [Candidate(0.5), Candidate(1.5)]
    >>> selector = RouletteWheelSelection().init(pop)
    >>> selector.select(pop, rng) in pop
    True
"""

from stochastic_wheel.exceptions import (
    DegenerateFitnessError,
    DrawLimitExceededError,
    EmptyPopulationError,
    InvalidFitnessError,
    SelectionError,
)
from stochastic_wheel.population import ScoredIndividual, as_fitness, fitness_array, fitness_of, scored_population
from stochastic_wheel.protocols import Individual, RandomSource, SelectionPolicy, Selector
from stochastic_wheel.registry import PolicyRegistry, list_policies
from stochastic_wheel.rng import NumpyRandomSource, as_random_source, require_random_source
from stochastic_wheel.selection import RouletteWheelSelection, RouletteWheelSelector
from stochastic_wheel.statistics import chi_square, expected_proportions, selection_counts

__all__ = [
    # Selection
    "RouletteWheelSelection",
    "RouletteWheelSelector",
    # Protocols
    "Individual",
    "RandomSource",
    "SelectionPolicy",
    "Selector",
    # Randomness
    "NumpyRandomSource",
    "as_random_source",
    "require_random_source",
    # Population helpers
    "ScoredIndividual",
    "scored_population",
    "as_fitness",
    "fitness_of",
    "fitness_array",
    # Registry system
    "PolicyRegistry",
    "list_policies",
    # Statistics
    "expected_proportions",
    "selection_counts",
    "chi_square",
    # Errors
    "SelectionError",
    "EmptyPopulationError",
    "InvalidFitnessError",
    "DegenerateFitnessError",
    "DrawLimitExceededError",
]
