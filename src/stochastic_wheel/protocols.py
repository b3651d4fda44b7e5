"""Protocol definitions for fitness-proportional selection.

This module defines the interfaces that connect the selection core to the rest
of an evolutionary algorithm. The core never depends on a concrete genome or
random number generator; it only relies on the capabilities below.

Consumed capabilities (supplied by the caller):

1. **Individual**: anything exposing ``fitness() -> float``. Fitness is a
   non-negative score where higher is better.

2. **RandomSource**: a seedable stream able to pick one element of a sequence
   uniformly and to flip a biased coin. ``NumpyRandomSource`` in
   ``stochastic_wheel.rng`` is the stock implementation.

Exposed capabilities (what the generational loop integrates with):

3. **SelectionPolicy**: stateless factory, called once per generation.

4. **Selector**: per-generation object, called once per parent needed.

Example usage:
    ```python
    def breed(policy: SelectionPolicy, population, rng: RandomSource, n_offspring: int):
        selector = policy.init(population)
        for _ in range(n_offspring):
            mother = selector.select(population, rng)
            father = selector.select(population, rng)
            yield crossover(mother, father)
    ```
"""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
I = TypeVar("I", bound="Individual")  # noqa: E741


@runtime_checkable
class Individual(Protocol):
    """Protocol for a candidate solution that can be selected.

    The selection core only reads ``fitness()``; it never inspects or mutates
    the individual otherwise. Values are interpreted as 32-bit floats.

    Example:
        ```python
        @dataclass
        class Route:
            stops: list[int]
            length: float

            def fitness(self) -> float:
                return 1.0 / self.length
        ```
    """

    def fitness(self) -> float:
        """Return the non-negative fitness of this individual."""
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the randomness consumed by a selector.

    Implementations are not expected to be thread-safe. Seeding two instances
    identically must reproduce the same sequence of draws.
    """

    def choose_uniform(self, sequence: Sequence[T]) -> T:
        """Return one element of ``sequence``, each with equal probability.

        Args:
            sequence: Non-empty indexable sequence.

        Returns:
            The chosen element.
        """
        ...

    def bernoulli(self, probability: float) -> bool:
        """Return True with the given probability.

        Args:
            probability: Success probability in [0, 1].

        Returns:
            Outcome of a single Bernoulli trial.
        """
        ...


@runtime_checkable
class Selector(Protocol):
    """Protocol for a per-generation parent selector.

    A selector is built by a SelectionPolicy from one population snapshot and
    can then draw from that same population any number of times.

    Parameters:
        population: The population the selector was built from.
        rng: Randomness source, used exclusively by the caller for the
            duration of the call.

    Returns:
        The selected individual itself (not a copy).
    """

    def select(self, population: Sequence[I], rng: RandomSource) -> I:
        """Select one individual from the population."""
        ...


@runtime_checkable
class SelectionPolicy(Protocol):
    """Protocol for a stateless selection strategy.

    The policy carries no per-generation data and can be shared across
    generations and threads. Each call to ``init`` scans the population and
    returns a fresh Selector.
    """

    def init(self, population: Sequence[Any]) -> Selector:
        """Prepare a selector for the given population."""
        ...
