"""Amortization failure kinds.

All subclass ValueError so callers that already guard on ValueError keep working.
"""


class AmortizationError(ValueError):
    """Base class for engine failures."""


class InvalidInput(AmortizationError):
    """Inputs the engine cannot amortize: non-positive principal, term < 1, non-finite values."""


class NumericOverflow(AmortizationError):
    """Intermediate values left the finite float range."""
