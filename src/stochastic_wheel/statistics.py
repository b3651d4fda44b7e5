"""Goodness-of-fit helpers for checking selection frequencies.

Used to verify that observed selection counts match fitness-proportional
expectations, both in tests and in the benchmark script.
"""

import numpy as np

# Upper critical values of the chi-square distribution at alpha = 0.001,
# indexed by degrees of freedom.
CHI_SQUARE_CRITICAL_0999 = {
    1: 10.828,
    2: 13.816,
    3: 16.266,
    4: 18.467,
    5: 20.515,
    6: 22.458,
    7: 24.322,
    8: 26.124,
    9: 27.877,
    10: 29.588,
}


def expected_proportions(fitness: np.ndarray) -> np.ndarray:
    """Compute fitness-proportional selection probabilities.

    Args:
        fitness: Non-negative fitness values, shape (n,).

    Returns:
        Array of shape (n,) with f_i / Σ(f_j), dtype float64.

    Raises:
        ValueError: If fitness is empty, not 1D, or sums to zero.
    """
    fitness = np.asarray(fitness, dtype=np.float64)
    if fitness.ndim != 1 or fitness.size == 0:
        raise ValueError(f"fitness must be a non-empty 1D array, got shape {fitness.shape}")
    total = fitness.sum()
    if total <= 0:
        raise ValueError(f"fitness must have a positive sum, got {total}")
    return fitness / total


def selection_counts(indices: np.ndarray, n: int) -> np.ndarray:
    """Count how often each position was selected.

    Args:
        indices: Selected positions, values in [0, n).
        n: Population size.

    Returns:
        Integer array of shape (n,).
    """
    return np.bincount(np.asarray(indices, dtype=np.intp), minlength=n)


def chi_square(observed: np.ndarray, proportions: np.ndarray) -> float:
    """Pearson chi-square statistic of observed counts against proportions.

    Args:
        observed: Observed counts, shape (k,).
        proportions: Expected probabilities, shape (k,), summing to 1.

    Returns:
        Σ (O_i - E_i)² / E_i where E_i = proportions_i * Σ O.

    Raises:
        ValueError: If shapes differ or any expected count is zero.
    """
    observed = np.asarray(observed, dtype=np.float64)
    proportions = np.asarray(proportions, dtype=np.float64)
    if observed.shape != proportions.shape:
        raise ValueError(f"observed has shape {observed.shape}, expected {proportions.shape} to match proportions")

    expected = proportions * observed.sum()
    if np.any(expected <= 0):
        raise ValueError("every expected count must be positive")

    return float(np.sum((observed - expected) ** 2 / expected))
