"""Shared test fixtures for stochastic-wheel tests.

This module provides common fixtures used across test modules:
- rng: Seeded randomness source
- golden_population: The [2, 1, 4, 3] population used for frequency checks
- ScriptedRandom: Deterministic source replaying predetermined draws
"""

from collections.abc import Sequence

import numpy as np
import pytest

from stochastic_wheel import NumpyRandomSource, ScoredIndividual, scored_population


class ScriptedRandom:
    """RandomSource that replays scripted choices and records every call.

    Args:
        choices: Positions returned by successive choose_uniform calls.
        outcomes: Results of successive bernoulli calls. If None, bernoulli
            returns True exactly when the probability is 1.0.
    """

    def __init__(self, choices: Sequence[int], outcomes: Sequence[bool] | None = None) -> None:
        self.choices = list(choices)
        self.outcomes = list(outcomes) if outcomes is not None else None
        self.probabilities: list[float] = []
        self.choose_calls = 0

    def choose_uniform(self, sequence):
        position = self.choices[self.choose_calls]
        self.choose_calls += 1
        return sequence[position]

    def bernoulli(self, probability: float) -> bool:
        self.probabilities.append(probability)
        if self.outcomes is None:
            return probability == 1.0
        return self.outcomes[len(self.probabilities) - 1]


class Candidate:
    """Plain individual with a mutable fitness, for tests that alter it."""

    def __init__(self, value: float) -> None:
        self.value = value

    def fitness(self) -> float:
        return self.value


@pytest.fixture
def rng() -> NumpyRandomSource:
    """Provide a seeded randomness source for deterministic tests."""
    return NumpyRandomSource(42)


@pytest.fixture
def golden_population() -> list[ScoredIndividual]:
    """Population with fitness [2, 1, 4, 3]; genomes are the positions."""
    return scored_population(np.array([2.0, 1.0, 4.0, 3.0]))
