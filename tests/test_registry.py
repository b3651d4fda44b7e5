"""Tests for the selection policy registry.

Following the project's testing philosophy:
- Test behavior, not implementation
- Each test should fail for one reason
- Assert both exception type and message fragment for error tests
"""

import numpy as np
import pytest

from stochastic_wheel import NumpyRandomSource, RouletteWheelSelection, SelectionPolicy, scored_population
from stochastic_wheel.registry import PolicyRegistry, list_policies


@pytest.fixture(autouse=True)
def isolate_registry():
    """Save and restore the registry to ensure test isolation."""
    saved = PolicyRegistry._registry.copy()
    PolicyRegistry._registry = {}
    yield
    PolicyRegistry._registry = saved


class BiasedPolicy:
    """Configurable stand-in policy for registry tests."""

    def __init__(self, bias: float = 1.0) -> None:
        self.bias = bias

    def init(self, population):
        return RouletteWheelSelection().init(population)


class TestPolicyRegistry:
    """Tests for PolicyRegistry."""

    def test_register_adds_factory(self) -> None:
        """Registering a factory makes it listable."""
        PolicyRegistry.register("biased", BiasedPolicy)
        assert "biased" in PolicyRegistry.list()

    def test_register_overwrites_existing(self) -> None:
        """Registering the same name twice keeps the latest factory."""
        PolicyRegistry.register("policy", BiasedPolicy)
        PolicyRegistry.register("policy", RouletteWheelSelection)

        assert PolicyRegistry.list() == ["policy"]
        assert isinstance(PolicyRegistry.get("policy"), RouletteWheelSelection)

    def test_get_passes_configuration(self) -> None:
        """Keyword arguments configure the created policy."""
        PolicyRegistry.register("biased", BiasedPolicy)

        policy = PolicyRegistry.get("biased", bias=2.5)

        assert policy.bias == 2.5

    def test_get_unknown_raises_with_available_names(self) -> None:
        """Unknown names raise KeyError listing what is registered."""
        PolicyRegistry.register("biased", BiasedPolicy)

        with pytest.raises(KeyError, match="Selection policy 'missing' not found. Available policies: biased"):
            PolicyRegistry.get("missing")

    def test_get_unknown_on_empty_registry(self) -> None:
        """An empty registry reports 'none' available."""
        with pytest.raises(KeyError, match="Available policies: none"):
            PolicyRegistry.get("roulette")

    def test_list_is_sorted(self) -> None:
        """list returns names in sorted order."""
        PolicyRegistry.register("zeta", BiasedPolicy)
        PolicyRegistry.register("alpha", BiasedPolicy)

        assert PolicyRegistry.list() == ["alpha", "zeta"]
        assert list_policies() == ["alpha", "zeta"]


class TestBuiltinRegistration:
    """Tests for policies registered by stochastic_wheel.selection."""

    def test_roulette_is_registered(self) -> None:
        """'roulette' is registered on import of the selection package."""
        # Force re-registration by reloading the module
        # (the autouse fixture clears the registry)
        import importlib

        import stochastic_wheel.selection

        importlib.reload(stochastic_wheel.selection)

        assert "roulette" in list_policies()
        policy = PolicyRegistry.get("roulette")
        assert isinstance(policy, SelectionPolicy)

    def test_registered_roulette_selects(self) -> None:
        """The registered policy builds a working selector."""
        import importlib

        import stochastic_wheel.selection

        importlib.reload(stochastic_wheel.selection)

        pop = scored_population(np.array([1.0, 2.0, 3.0]))
        selector = PolicyRegistry.get("roulette").init(pop)

        assert selector.max_fitness == 3.0
        assert 0 <= selector.select_index(pop, NumpyRandomSource(0)) < 3
