"""Registry for selection policies.

Policies are registered by name as factories, so an experiment can pick its
selection strategy from a configuration string instead of importing a class.
Keyword arguments passed to ``get`` are forwarded to the factory, which lets a
registered policy be configured at retrieval time.

Basic usage:
    ```python
    from stochastic_wheel.registry import PolicyRegistry, list_policies

    # Built-in policies are registered when stochastic_wheel.selection is imported
    policy = PolicyRegistry.get("roulette")
    selector = policy.init(population)

    # Register a custom factory
    PolicyRegistry.register("my_policy", lambda bias=1.0: MyPolicy(bias))
    policy = PolicyRegistry.get("my_policy", bias=2.0)

    list_policies()  # ["my_policy", "roulette"]
    ```
"""

from collections.abc import Callable

from stochastic_wheel.protocols import SelectionPolicy


class PolicyRegistry:
    """Class-level registry of selection policy factories.

    Class Attributes:
        _registry: Dictionary mapping policy names to factories. Each factory
            accepts keyword arguments and returns a SelectionPolicy.
    """

    _registry: dict[str, Callable[..., SelectionPolicy]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., SelectionPolicy]) -> None:
        """Register a selection policy factory.

        Args:
            name: Unique name for the policy. Overwrites any existing entry.
            factory: Callable returning a SelectionPolicy. A policy class
                works directly.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> SelectionPolicy:
        """Get a configured selection policy by name.

        Args:
            name: Name of the registered policy.
            **kwargs: Configuration passed to the factory.

        Returns:
            A SelectionPolicy instance.

        Raises:
            KeyError: If the name is not registered. The message lists the
                available policies.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Selection policy '{name}' not found. Available policies: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return the sorted names of all registered policies."""
        return sorted(cls._registry.keys())


def list_policies() -> list[str]:
    """List all registered selection policies.

    Convenience function that returns PolicyRegistry.list().
    """
    return PolicyRegistry.list()
