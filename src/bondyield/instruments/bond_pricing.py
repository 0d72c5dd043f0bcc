"""Fixed-income pricing: period decomposition and present value of a coupon bond."""

from __future__ import annotations

from ..core.types import CouponFrequency, PeriodDecomposition

__all__ = [
    "decompose_periods",
    "price_at_periodic_rate",
    "bond_price",
]


def decompose_periods(
    face_value: float,
    annual_coupon_rate: float,
    years_to_maturity: float,
    coupon_frequency: CouponFrequency,
) -> PeriodDecomposition:
    """Split a bond into equal coupon periods.

    This is the only place frequency is turned into period counts and
    per-period coupons; the YTM solver and the schedule generator both
    call it.

    Args:
        face_value: Par value of the bond.
        annual_coupon_rate: Annual coupon rate in percent.
        years_to_maturity: Whole years to maturity.
        coupon_frequency: Annual or semi-annual coupons.

    Returns:
        Periods per year, total periods and coupon per period.
    """
    periods_per_year = coupon_frequency.periods_per_year
    total_periods = int(years_to_maturity * periods_per_year)
    coupon_per_period = (face_value * (annual_coupon_rate / 100)) / periods_per_year
    return PeriodDecomposition(
        periods_per_year=periods_per_year,
        total_periods=total_periods,
        coupon_per_period=coupon_per_period,
    )


def price_at_periodic_rate(
    face_value: float,
    coupon_per_period: float,
    periods: int,
    rate_per_period: float,
) -> float:
    """Present value of a bond's cash flows at a periodic discount rate.

    PV = sum(coupon / (1 + r)^t for t in 1..n) + face / (1 + r)^n

    Inputs are not checked: ``periods`` must be positive and
    ``rate_per_period`` greater than -1.

    Args:
        face_value: Principal repaid with the final coupon.
        coupon_per_period: Coupon paid each period.
        periods: Number of coupon periods.
        rate_per_period: Discount rate applied once per period.

    Returns:
        Present value of all remaining cash flows.
    """
    if rate_per_period == 0:
        return periods * coupon_per_period + face_value

    pv = 0.0
    for t in range(1, periods + 1):
        pv += coupon_per_period / (1 + rate_per_period) ** t
    pv += face_value / (1 + rate_per_period) ** periods
    return pv


def bond_price(
    face_value: float,
    annual_coupon_rate: float,
    annual_yield: float,
    years_to_maturity: float,
    coupon_frequency: CouponFrequency = CouponFrequency.ANNUAL,
) -> float:
    """Price a coupon bond from an annual yield.

    Args:
        face_value: Par value of the bond.
        annual_coupon_rate: Annual coupon rate in percent.
        annual_yield: Annual yield in percent, compounded at the coupon frequency.
        years_to_maturity: Whole years to maturity.
        coupon_frequency: Annual or semi-annual coupons.

    Returns:
        Present value of the bond.
    """
    decomposition = decompose_periods(
        face_value, annual_coupon_rate, years_to_maturity, coupon_frequency,
    )
    rate = (annual_yield / 100) / decomposition.periods_per_year
    return price_at_periodic_rate(
        face_value,
        decomposition.coupon_per_period,
        decomposition.total_periods,
        rate,
    )
