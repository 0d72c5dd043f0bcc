"""Yield to maturity by bisection over the bond pricing function.

The price of a fixed-coupon bond falls strictly as its periodic yield
rises, so a root inside ``[lower_bound, upper_bound]`` can be bracketed
and halved until the price matches the market within tolerance.

Example::

    from bondyield.core.types import CouponFrequency
    from bondyield.instruments.ytm import solve_ytm

    solve_ytm(1000, 5, 950, 5, CouponFrequency.ANNUAL)  # ~6.19
"""

from __future__ import annotations

import logging

from ..core.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from ..core.types import ConvergenceError, CouponFrequency, YTMSolution
from .bond_pricing import decompose_periods, price_at_periodic_rate

__all__ = [
    "solve_ytm",
    "solve_ytm_detailed",
]

logger = logging.getLogger(__name__)


def _brackets_price(
    face_value: float,
    coupon_per_period: float,
    periods: int,
    low: float,
    high: float,
    market_price: float,
) -> bool:
    """Whether ``market_price`` lies between the prices at ``high`` and ``low``."""
    price_low = price_at_periodic_rate(face_value, coupon_per_period, periods, low)
    price_high = price_at_periodic_rate(face_value, coupon_per_period, periods, high)
    return price_high <= market_price <= price_low


def solve_ytm_detailed(
    face_value: float,
    annual_coupon_rate: float,
    market_price: float,
    years_to_maturity: float,
    coupon_frequency: CouponFrequency,
    config: SolverConfig | None = None,
) -> YTMSolution:
    """Solve for yield to maturity and report how the root was accepted.

    Args:
        face_value: Par value.
        annual_coupon_rate: Annual coupon rate in percent.
        market_price: Observed market price.
        years_to_maturity: Whole years to maturity.
        coupon_frequency: Annual or semi-annual coupons.
        config: Solver bounds, tolerances and iteration cap. Defaults to
            :data:`~bondyield.core.config.DEFAULT_SOLVER_CONFIG`.

    Returns:
        The accepted periodic rate, its annualised percentage and
        convergence diagnostics.

    Raises:
        ConvergenceError: If neither the price tolerance nor the bracket
            floor is reached within ``config.max_iterations`` steps, or the
            bracket collapses without enclosing the market price (no root
            in the search domain).
    """
    cfg = config or DEFAULT_SOLVER_CONFIG
    decomposition = decompose_periods(
        face_value, annual_coupon_rate, years_to_maturity, coupon_frequency,
    )

    low, high = cfg.lower_bound, cfg.upper_bound
    for iteration in range(1, cfg.max_iterations + 1):
        mid = (low + high) / 2
        price_at_mid = price_at_periodic_rate(
            face_value,
            decomposition.coupon_per_period,
            decomposition.total_periods,
            mid,
        )

        error = price_at_mid - market_price
        abs_error = abs(error)
        rel_error = abs_error / market_price if market_price > 0 else 0.0

        criterion = None
        if abs_error <= cfg.abs_tolerance:
            criterion = "absolute"
        elif rel_error <= cfg.rel_tolerance:
            criterion = "relative"
        elif high - low <= cfg.bracket_floor:
            if not _brackets_price(face_value, decomposition.coupon_per_period,
                                   decomposition.total_periods, low, high, market_price):
                # Collapsed onto a domain edge: the root lies outside [lower, upper].
                logger.error(
                    "YTM root lies outside the search domain [%g, %g] for price %s; "
                    "bracket collapsed after %d of %d iterations",
                    cfg.lower_bound, cfg.upper_bound, market_price, iteration,
                    cfg.max_iterations,
                )
                raise ConvergenceError(cfg.max_iterations)
            criterion = "bracket"
            logger.warning(
                "YTM bracket collapsed at rate %.12g with price error %.6g",
                mid, error,
            )

        if criterion is not None:
            annual_yield = mid * decomposition.periods_per_year * 100
            logger.debug(
                "YTM converged after %d iterations (%s): periodic rate %.12g",
                iteration, criterion, mid,
            )
            return YTMSolution(
                periodic_rate=mid,
                annual_yield=annual_yield,
                iterations=iteration,
                price_error=error,
                criterion=criterion,
            )

        if price_at_mid > market_price:
            low = mid
        else:
            high = mid

    logger.error(
        "YTM did not converge: face=%s coupon=%s%% price=%s years=%s freq=%s",
        face_value, annual_coupon_rate, market_price, years_to_maturity,
        coupon_frequency.value,
    )
    raise ConvergenceError(cfg.max_iterations)


def solve_ytm(
    face_value: float,
    annual_coupon_rate: float,
    market_price: float,
    years_to_maturity: float,
    coupon_frequency: CouponFrequency,
    config: SolverConfig | None = None,
) -> float:
    """Solve for yield to maturity via bisection.

    Args:
        face_value: Par value.
        annual_coupon_rate: Annual coupon rate in percent.
        market_price: Observed market price.
        years_to_maturity: Whole years to maturity.
        coupon_frequency: Annual or semi-annual coupons.
        config: Optional solver configuration.

    Returns:
        Yield to maturity as an annual percentage (5.23 for 5.23%).

    Raises:
        ConvergenceError: If the bisection exhausts its iteration budget.
    """
    return solve_ytm_detailed(
        face_value,
        annual_coupon_rate,
        market_price,
        years_to_maturity,
        coupon_frequency,
        config=config,
    ).annual_yield
