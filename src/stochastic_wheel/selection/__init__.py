"""Selection policies for evolutionary algorithms."""

from stochastic_wheel.registry import PolicyRegistry
from stochastic_wheel.selection.roulette import RouletteWheelSelection, RouletteWheelSelector

# Register built-in selection policies
PolicyRegistry.register("roulette", RouletteWheelSelection)

__all__ = ["RouletteWheelSelection", "RouletteWheelSelector"]
