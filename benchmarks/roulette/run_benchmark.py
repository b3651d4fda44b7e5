"""Benchmark comparing stochastic acceptance with cumulative-table sampling.

For several fitness distributions, this script selects parents with
stochastic-wheel's RouletteWheelSelector and with numpy's
Generator.choice(p=...), which builds a cumulative table on every call. Both
are timed and checked against the expected fitness proportions with a
chi-square test.

Usage:
    python benchmarks/roulette/run_benchmark.py
"""

import json
import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import numpy as np

from stochastic_wheel import (
    NumpyRandomSource,
    RouletteWheelSelection,
    chi_square,
    expected_proportions,
    scored_population,
    selection_counts,
)
from stochastic_wheel.statistics import CHI_SQUARE_CRITICAL_0999

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
POP_SIZE = 200
N_SELECTIONS = 20_000
N_RUNS = 5
SEEDS = list(range(N_RUNS))
CHECK_BINS = 10


def uniform_fitness(rng: np.random.Generator) -> np.ndarray:
    return rng.uniform(0.0, 1.0, size=POP_SIZE)


def skewed_fitness(rng: np.random.Generator) -> np.ndarray:
    return rng.exponential(1.0, size=POP_SIZE)


def one_dominant_fitness(rng: np.random.Generator) -> np.ndarray:
    fitness = rng.uniform(0.0, 0.01, size=POP_SIZE)
    fitness[0] = 1.0
    return fitness


DISTRIBUTIONS: dict[str, Callable[[np.random.Generator], np.ndarray]] = {
    "uniform": uniform_fitness,
    "skewed": skewed_fitness,
    "one_dominant": one_dominant_fitness,
}


def run_stochastic_acceptance(fitness: np.ndarray, seed: int) -> tuple[np.ndarray, float]:
    """Select with stochastic acceptance.

    Args:
        fitness: Population fitness values.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (selected indices, elapsed_time_seconds).
    """
    population = scored_population(fitness)
    rng = NumpyRandomSource(seed)

    start_time = time.perf_counter()
    selector = RouletteWheelSelection().init(population)
    selected = selector.select_indices(population, rng, n=N_SELECTIONS)
    elapsed = time.perf_counter() - start_time

    return selected, elapsed


def run_cumulative_table(fitness: np.ndarray, seed: int) -> tuple[np.ndarray, float]:
    """Select one parent at a time with numpy's cumulative-table sampling.

    Args:
        fitness: Population fitness values.
        seed: Random seed for reproducibility.

    Returns:
        Tuple of (selected indices, elapsed_time_seconds).
    """
    rng = np.random.default_rng(seed)

    start_time = time.perf_counter()
    probs = fitness / fitness.sum()
    selected = np.array([rng.choice(len(fitness), p=probs) for _ in range(N_SELECTIONS)], dtype=np.intp)
    elapsed = time.perf_counter() - start_time

    return selected, elapsed


def binned_chi_square(selected: np.ndarray, fitness: np.ndarray) -> float:
    """Chi-square statistic over CHECK_BINS groups of consecutive individuals.

    Grouping keeps expected counts large enough for the test to be valid.
    """
    counts = selection_counts(selected, len(fitness))
    proportions = expected_proportions(fitness)
    groups = np.array_split(np.arange(len(fitness)), CHECK_BINS)
    observed = np.array([counts[g].sum() for g in groups])
    expected = np.array([proportions[g].sum() for g in groups])
    return chi_square(observed, expected)


def run_benchmark() -> dict:
    """Run all samplers on all distributions.

    Returns:
        Dictionary with metadata and per-run results.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "pop_size": POP_SIZE,
            "n_selections": N_SELECTIONS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
            "check_bins": CHECK_BINS,
        },
    }

    results = []

    runners = [
        ("stochastic-acceptance", run_stochastic_acceptance),
        ("cumulative-table", run_cumulative_table),
    ]

    critical = CHI_SQUARE_CRITICAL_0999[CHECK_BINS - 1]
    total_runs = len(DISTRIBUTIONS) * len(runners) * N_RUNS
    current_run = 0

    for dist_name, make_fitness in DISTRIBUTIONS.items():
        for sampler_name, runner in runners:
            for seed in SEEDS:
                current_run += 1
                logger.info(f"Running [{current_run}/{total_runs}]: {sampler_name} on {dist_name} (seed={seed})")

                fitness = make_fitness(np.random.default_rng(seed))
                selected, elapsed = runner(fitness, seed)
                stat = binned_chi_square(selected, fitness)

                if stat >= critical:
                    logger.warning(f"  chi-square {stat:.2f} exceeds critical value {critical:.2f}")

                results.append(
                    {
                        "sampler": sampler_name,
                        "distribution": dist_name,
                        "seed": seed,
                        "chi_square": stat,
                        "time_seconds": elapsed,
                    }
                )

                logger.info(f"  chi2: {stat:.2f}, Time: {elapsed:.3f}s")

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    from collections import defaultdict

    data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        data[r["distribution"]][r["sampler"]].append(r)

    samplers = ["stochastic-acceptance", "cumulative-table"]

    print("\n" + "=" * 72)
    print("BENCHMARK SUMMARY")
    print("=" * 72)
    print(f"\nParameters: pop_size={POP_SIZE}, selections={N_SELECTIONS}, runs={N_RUNS}")
    print()

    header = f"{'Distribution':<14}"
    for sampler in samplers:
        header += f"{sampler:>29}"
    print(header)
    print("-" * 72)

    for dist_name in sorted(data.keys()):
        row = f"{dist_name:<14}"
        for sampler in samplers:
            runs = data[dist_name][sampler]
            mean_time = np.mean([r["time_seconds"] for r in runs])
            mean_chi2 = np.mean([r["chi_square"] for r in runs])
            row += f"{mean_time:>16.3f}s chi2={mean_chi2:>6.2f}"
        print(row)

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting roulette wheel benchmark")
    logger.info(f"Parameters: pop_size={POP_SIZE}, selections={N_SELECTIONS}, runs={N_RUNS}")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
