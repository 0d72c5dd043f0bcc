"""Numerical constants and solver configuration.

The bisection bounds, tolerances and iteration cap are named here so that
callers and tests can refer to them instead of repeating literals.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = [
    "BISECTION_LOWER_BOUND",
    "BISECTION_UPPER_BOUND",
    "BISECTION_TOLERANCE_ABS",
    "BISECTION_TOLERANCE_REL",
    "BISECTION_MAX_ITERATIONS",
    "BRACKET_WIDTH_FLOOR",
    "ROUNDING_DECIMALS",
    "DISPLAY_CURRENCY",
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
]

# Periodic-rate search domain: 0% to 100% per coupon period.
BISECTION_LOWER_BOUND = 0.0
BISECTION_UPPER_BOUND = 1.0

# Absolute tolerance is in currency units.
BISECTION_TOLERANCE_ABS = 0.0001
BISECTION_TOLERANCE_REL = 1e-8
BISECTION_MAX_ITERATIONS = 2000

# Bracket width below which further halving cannot move the midpoint.
BRACKET_WIDTH_FLOOR = 2 * float(np.finfo(float).eps)

ROUNDING_DECIMALS = 2
DISPLAY_CURRENCY = "AED"


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for the YTM bisection solver.

    Attributes:
        lower_bound: Lowest periodic rate searched.
        upper_bound: Highest periodic rate searched.
        abs_tolerance: Accept when the pricing error is within this many
            currency units.
        rel_tolerance: Accept when the pricing error relative to the market
            price is within this fraction.
        max_iterations: Iteration cap; exceeding it raises
            :class:`~bondyield.core.types.ConvergenceError`.
        bracket_floor: Accept the midpoint once the bracket is this narrow.
    """

    lower_bound: float = BISECTION_LOWER_BOUND
    upper_bound: float = BISECTION_UPPER_BOUND
    abs_tolerance: float = BISECTION_TOLERANCE_ABS
    rel_tolerance: float = BISECTION_TOLERANCE_REL
    max_iterations: int = BISECTION_MAX_ITERATIONS
    bracket_floor: float = BRACKET_WIDTH_FLOOR

    def __post_init__(self) -> None:
        if self.lower_bound >= self.upper_bound:
            raise ValueError("lower_bound must be below upper_bound")
        if self.lower_bound <= -1.0:
            raise ValueError("lower_bound must be greater than -1")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")
        if self.abs_tolerance < 0 or self.rel_tolerance < 0:
            raise ValueError("tolerances cannot be negative")
        if self.bracket_floor < 0:
            raise ValueError("bracket_floor cannot be negative")


DEFAULT_SOLVER_CONFIG = SolverConfig()
