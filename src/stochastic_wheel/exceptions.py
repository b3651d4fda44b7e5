"""Error types raised by fitness-proportional selection.

Every failure is a subclass of SelectionError so callers can catch the whole
family at once. The input-validation kinds also derive from ValueError, which
is what the rest of the framework raises for bad input:

- EmptyPopulationError: there is nothing to select from.
- InvalidFitnessError: a fitness value is NaN, infinite, negative, not numeric,
  or larger than the maximum recorded when the selector was built.
- DegenerateFitnessError: the maximum fitness is zero, so no acceptance
  probability can be computed.
- DrawLimitExceededError: a caller-imposed draw budget ran out before any
  candidate was accepted.
"""


class SelectionError(Exception):
    """Base class for all selection failures."""


class EmptyPopulationError(SelectionError, ValueError):
    """Raised when a selector is built from, or draws from, an empty population."""


class InvalidFitnessError(SelectionError, ValueError):
    """Raised when a fitness value cannot be used as a selection weight."""


class DegenerateFitnessError(SelectionError, ValueError):
    """Raised when every fitness in the population is zero."""


class DrawLimitExceededError(SelectionError, RuntimeError):
    """Raised when ``max_draws`` candidates were all rejected.

    Attributes:
        draws: Number of candidates drawn before giving up.
    """

    def __init__(self, draws: int) -> None:
        super().__init__(f"no candidate accepted after {draws} draws")
        self.draws = draws
