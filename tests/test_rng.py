"""Tests for the numpy-backed randomness source."""

import numpy as np
import pytest
from conftest import ScriptedRandom

from stochastic_wheel import NumpyRandomSource, RandomSource, as_random_source, require_random_source


class TestNumpyRandomSource:
    """Tests for NumpyRandomSource."""

    def test_satisfies_random_source_protocol(self) -> None:
        """NumpyRandomSource is a RandomSource."""
        assert isinstance(NumpyRandomSource(0), RandomSource)

    def test_choose_uniform_returns_element(self, rng) -> None:
        """choose_uniform returns a member of the sequence."""
        items = ["a", "b", "c"]
        for _ in range(20):
            assert rng.choose_uniform(items) in items

    def test_choose_uniform_on_range_returns_position(self, rng) -> None:
        """Choosing from a range yields a valid position."""
        for _ in range(20):
            assert 0 <= rng.choose_uniform(range(5)) < 5

    def test_choose_uniform_covers_all_elements(self, rng) -> None:
        """Every element is eventually chosen."""
        chosen = {rng.choose_uniform(range(4)) for _ in range(200)}
        assert chosen == {0, 1, 2, 3}

    def test_choose_uniform_empty_raises(self, rng) -> None:
        """Choosing from an empty sequence raises ValueError."""
        with pytest.raises(ValueError, match="cannot choose from an empty sequence"):
            rng.choose_uniform([])

    def test_bernoulli_certain_outcomes(self, rng) -> None:
        """Probability 1 always succeeds and 0 always fails."""
        assert all(rng.bernoulli(1.0) for _ in range(100))
        assert not any(rng.bernoulli(0.0) for _ in range(100))

    def test_bernoulli_frequency(self, rng) -> None:
        """Success frequency approaches the probability."""
        successes = sum(rng.bernoulli(0.3) for _ in range(10000))
        assert 2700 < successes < 3300

    def test_bernoulli_returns_bool(self, rng) -> None:
        """bernoulli returns a Python bool."""
        assert isinstance(rng.bernoulli(0.5), bool)

    @pytest.mark.parametrize("probability", [-0.1, 1.5, float("nan")])
    def test_bernoulli_rejects_invalid_probability(self, rng, probability) -> None:
        """Probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError, match="probability must be in"):
            rng.bernoulli(probability)

    def test_same_seed_same_sequence(self) -> None:
        """Equal seeds reproduce the same draws."""
        a = NumpyRandomSource(42)
        b = NumpyRandomSource(42)

        draws_a = [(a.choose_uniform(range(10)), a.bernoulli(0.5)) for _ in range(50)]
        draws_b = [(b.choose_uniform(range(10)), b.bernoulli(0.5)) for _ in range(50)]

        assert draws_a == draws_b

    def test_wraps_existing_generator(self) -> None:
        """A Generator is wrapped, not copied."""
        generator = np.random.default_rng(1)
        source = NumpyRandomSource(generator)

        assert source.generator is generator

    def test_spawn_gives_independent_deterministic_children(self) -> None:
        """Spawned children are reproducible and differ from each other."""
        first = NumpyRandomSource(5).spawn(2)
        second = NumpyRandomSource(5).spawn(2)

        seq = [[c.choose_uniform(range(1000)) for _ in range(20)] for c in first]
        seq_again = [[c.choose_uniform(range(1000)) for _ in range(20)] for c in second]

        assert len(first) == 2
        assert seq == seq_again
        assert seq[0] != seq[1]


class TestAsRandomSource:
    """Tests for as_random_source."""

    def test_returns_random_source_unchanged(self) -> None:
        """Objects already satisfying RandomSource pass through."""
        scripted = ScriptedRandom(choices=[0])
        assert as_random_source(scripted) is scripted

    def test_wraps_generator(self) -> None:
        """A numpy Generator is wrapped."""
        generator = np.random.default_rng(0)
        source = as_random_source(generator)

        assert isinstance(source, NumpyRandomSource)
        assert source.generator is generator

    def test_seeds_from_int(self) -> None:
        """An int seeds a new NumpyRandomSource."""
        a = as_random_source(3)
        b = as_random_source(3)

        assert a.choose_uniform(range(100)) == b.choose_uniform(range(100))

    def test_none_uses_fresh_entropy(self) -> None:
        """None produces a working source."""
        assert isinstance(as_random_source(None), NumpyRandomSource)


class TestRequireRandomSource:
    """Tests for require_random_source."""

    def test_returns_random_source_unchanged(self) -> None:
        """Objects already satisfying RandomSource pass through."""
        source = NumpyRandomSource(0)
        assert require_random_source(source) is source

    def test_wraps_generator_without_copying(self) -> None:
        """A numpy Generator is wrapped, sharing its state."""
        generator = np.random.default_rng(0)
        assert require_random_source(generator).generator is generator

    @pytest.mark.parametrize("seed", [7, None, np.random.SeedSequence(1)])
    def test_rejects_seeds(self, seed) -> None:
        """Seeds and None are refused."""
        with pytest.raises(TypeError, match="rng must be a RandomSource or numpy Generator"):
            require_random_source(seed)
