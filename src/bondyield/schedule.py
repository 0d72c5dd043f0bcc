"""Periodic cash-flow schedule for a bullet coupon bond."""

from __future__ import annotations

from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta

from .core.types import CashFlowScheduleEntry, CouponFrequency
from .instruments.bond_pricing import decompose_periods

__all__ = [
    "generate_cash_flow_schedule",
]


def generate_cash_flow_schedule(
    face_value: float,
    annual_coupon_rate: float,
    years_to_maturity: float,
    coupon_frequency: CouponFrequency,
    start: datetime | None = None,
) -> list[CashFlowScheduleEntry]:
    """Build the coupon schedule from ``start`` to maturity.

    Period ``k`` pays on ``start`` plus ``k * 12 / periods_per_year``
    calendar months. Month ends are clamped (31 January plus one month is
    28 or 29 February). Cumulative interest is a running sum of the
    per-period coupon. Principal stays outstanding until the final period,
    where it is retired in full.

    Args:
        face_value: Par value.
        annual_coupon_rate: Annual coupon rate in percent.
        years_to_maturity: Whole years to maturity.
        coupon_frequency: Annual or semi-annual coupons.
        start: Anchor instant. Defaults to the current UTC time.

    Returns:
        One entry per coupon period, ordered by period.
    """
    if start is None:
        start = datetime.now(timezone.utc)

    decomposition = decompose_periods(
        face_value, annual_coupon_rate, years_to_maturity, coupon_frequency,
    )
    months_per_period = 12 // decomposition.periods_per_year
    last_period = decomposition.total_periods

    schedule: list[CashFlowScheduleEntry] = []
    cumulative_interest = 0.0
    for period in range(1, last_period + 1):
        cumulative_interest += decomposition.coupon_per_period
        schedule.append(CashFlowScheduleEntry(
            period=period,
            payment_date=start + relativedelta(months=months_per_period * period),
            coupon_payment=decomposition.coupon_per_period,
            cumulative_interest=cumulative_interest,
            remaining_principal=0.0 if period == last_period else face_value,
        ))
    return schedule
