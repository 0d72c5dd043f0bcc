"""Headline bond metrics and the combined per-bond calculation."""

from __future__ import annotations

import math
from datetime import datetime

from .core.config import ROUNDING_DECIMALS, SolverConfig
from .core.types import BondInput, BondMetricsResult, PremiumOrDiscount
from .instruments.ytm import solve_ytm
from .schedule import generate_cash_flow_schedule

__all__ = [
    "annual_coupon",
    "current_yield",
    "total_interest",
    "premium_or_discount",
    "round_half_up",
    "calculate_bond_metrics",
]


def annual_coupon(face_value: float, annual_coupon_rate: float) -> float:
    """Coupon paid per year.

    Args:
        face_value: Par value.
        annual_coupon_rate: Annual coupon rate in percent.

    Returns:
        ``face_value * annual_coupon_rate / 100``.
    """
    return face_value * (annual_coupon_rate / 100)


def current_yield(annual_coupon_amount: float, market_price: float) -> float:
    """Annual coupon divided by market price, as a decimal (0.05 for 5%)."""
    return annual_coupon_amount / market_price


def total_interest(annual_coupon_amount: float, years_to_maturity: float) -> float:
    """Undiscounted sum of nominal coupons over the bond's life."""
    return annual_coupon_amount * years_to_maturity


def premium_or_discount(face_value: float, market_price: float) -> PremiumOrDiscount:
    """Classify the market price against face value.

    Equality is exact; a price one cent away from face value is a premium
    or a discount, never par.
    """
    if market_price > face_value:
        return PremiumOrDiscount.PREMIUM
    if market_price < face_value:
        return PremiumOrDiscount.DISCOUNT
    return PremiumOrDiscount.PAR


def round_half_up(value: float, decimals: int = ROUNDING_DECIMALS) -> float:
    """Round with halves going up (towards +inf) rather than to even."""
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def calculate_bond_metrics(
    bond: BondInput,
    start: datetime | None = None,
    solver_config: SolverConfig | None = None,
) -> BondMetricsResult:
    """Compute every metric for a validated bond.

    Current yield (as a percent), YTM and total interest are rounded to
    two decimals; their raw values and the schedule are left unrounded.

    Args:
        bond: Validated bond inputs.
        start: Anchor for the schedule's payment dates. Defaults to now (UTC).
        solver_config: Optional YTM solver configuration.

    Returns:
        The populated result.

    Raises:
        ConvergenceError: If the YTM solver does not converge.
    """
    coupon = annual_coupon(bond.face_value, bond.annual_coupon_rate)
    yield_decimal = current_yield(coupon, bond.market_price)
    interest = total_interest(coupon, bond.years_to_maturity)
    ytm = solve_ytm(
        bond.face_value,
        bond.annual_coupon_rate,
        bond.market_price,
        bond.years_to_maturity,
        bond.coupon_frequency,
        config=solver_config,
    )
    schedule = generate_cash_flow_schedule(
        bond.face_value,
        bond.annual_coupon_rate,
        bond.years_to_maturity,
        bond.coupon_frequency,
        start=start,
    )

    return BondMetricsResult(
        current_yield=round_half_up(yield_decimal * 100),
        ytm=round_half_up(ytm),
        total_interest=round_half_up(interest),
        premium_or_discount=premium_or_discount(bond.face_value, bond.market_price),
        cash_flow_schedule=tuple(schedule),
        annual_coupon=coupon,
        current_yield_raw=yield_decimal,
        ytm_raw=ytm,
        total_interest_raw=interest,
    )
