"""Dataclass and enum types used across BondYield.

All structured results are returned as frozen dataclasses for
immutability, dot-access, and clear ``repr`` output.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any

__all__ = [
    "CouponFrequency",
    "PremiumOrDiscount",
    "ConvergenceError",
    "BondInput",
    "PeriodDecomposition",
    "CashFlowScheduleEntry",
    "YTMSolution",
    "BondMetricsResult",
    "iso_timestamp",
]


class CouponFrequency(Enum):
    """How often a bond pays its coupon."""

    ANNUAL = "ANNUAL"
    SEMI_ANNUAL = "SEMI_ANNUAL"

    @property
    def periods_per_year(self) -> int:
        """Number of coupon periods in one year."""
        return 2 if self is CouponFrequency.SEMI_ANNUAL else 1


class PremiumOrDiscount(Enum):
    """Market price relative to face value."""

    PREMIUM = "PREMIUM"
    DISCOUNT = "DISCOUNT"
    PAR = "PAR"


class ConvergenceError(RuntimeError):
    """Raised when the YTM bisection exhausts its iteration budget.

    Attributes:
        max_iterations: The iteration cap that was attempted.
    """

    def __init__(self, max_iterations: int) -> None:
        self.max_iterations = max_iterations
        super().__init__(f"YTM failed to converge within {max_iterations} iterations")


def iso_timestamp(value: datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


@dataclass(frozen=True)
class BondInput:
    """Validated inputs for a single bond calculation.

    Attributes:
        face_value: Par value repaid at maturity.
        annual_coupon_rate: Annual coupon rate in percent (5 means 5%).
        market_price: Observed price of the bond.
        years_to_maturity: Whole years until the final cash flow.
        coupon_frequency: Annual or semi-annual coupons.
    """

    face_value: float
    annual_coupon_rate: float
    market_price: float
    years_to_maturity: float
    coupon_frequency: CouponFrequency

    def __repr__(self) -> str:
        return (
            f"BondInput(face={self.face_value:,.2f}, coupon={self.annual_coupon_rate:.4f}%, "
            f"price={self.market_price:,.2f}, years={self.years_to_maturity:g}, "
            f"freq={self.coupon_frequency.value})"
        )


@dataclass(frozen=True)
class PeriodDecomposition:
    """Coupon-period view of a bond, shared by the solver and the schedule."""

    periods_per_year: int
    total_periods: int
    coupon_per_period: float

    def __repr__(self) -> str:
        return (
            f"PeriodDecomposition(per_year={self.periods_per_year}, "
            f"periods={self.total_periods}, coupon={self.coupon_per_period:.4f})"
        )


@dataclass(frozen=True)
class CashFlowScheduleEntry:
    """One coupon date in a bond's cash-flow schedule."""

    period: int
    payment_date: datetime
    coupon_payment: float
    cumulative_interest: float
    remaining_principal: float

    def to_dict(self) -> dict[str, Any]:
        """Return the entry in its camelCase wire shape."""
        return {
            "period": self.period,
            "paymentDate": iso_timestamp(self.payment_date),
            "couponPayment": self.coupon_payment,
            "cumulativeInterest": self.cumulative_interest,
            "remainingPrincipal": self.remaining_principal,
        }


@dataclass(frozen=True)
class YTMSolution:
    """Outcome of a converged YTM bisection.

    Attributes:
        periodic_rate: Root found on the per-period scale.
        annual_yield: Annualised yield in percent.
        iterations: Bisection steps taken, including the accepting one.
        price_error: ``price(periodic_rate) - market_price``.
        criterion: ``"absolute"``, ``"relative"`` or ``"bracket"``.
    """

    periodic_rate: float
    annual_yield: float
    iterations: int
    price_error: float
    criterion: str

    def __repr__(self) -> str:
        return (
            f"YTMSolution(ytm={self.annual_yield:.6f}%, iterations={self.iterations}, "
            f"error={self.price_error:.2e}, by={self.criterion})"
        )


@dataclass(frozen=True)
class BondMetricsResult:
    """Full set of metrics for one bond.

    The headline figures are rounded to two decimals for presentation;
    the ``*_raw`` fields keep the unrounded values. Schedule entries are
    never rounded.

    Attributes:
        current_yield: Current yield in percent, rounded.
        ytm: Yield to maturity in percent, rounded.
        total_interest: Undiscounted coupon total over the life, rounded.
        premium_or_discount: Price classification against face value.
        cash_flow_schedule: Entries ordered by period.
        annual_coupon: Coupon paid per year.
        current_yield_raw: Current yield as a decimal.
        ytm_raw: Yield to maturity in percent.
        total_interest_raw: Unrounded total interest.
    """

    current_yield: float
    ytm: float
    total_interest: float
    premium_or_discount: PremiumOrDiscount
    cash_flow_schedule: tuple[CashFlowScheduleEntry, ...]
    annual_coupon: float
    current_yield_raw: float
    ytm_raw: float
    total_interest_raw: float

    def to_dict(self) -> dict[str, Any]:
        """Return the result in its camelCase wire shape."""
        return {
            "currentYield": self.current_yield,
            "ytm": self.ytm,
            "totalInterest": self.total_interest,
            "premiumOrDiscount": self.premium_or_discount.value,
            "cashFlowSchedule": [entry.to_dict() for entry in self.cash_flow_schedule],
        }

    def __repr__(self) -> str:
        return (
            f"BondMetricsResult(current_yield={self.current_yield:.2f}%, ytm={self.ytm:.2f}%, "
            f"total_interest={self.total_interest:,.2f}, {self.premium_or_discount.value}, "
            f"periods={len(self.cash_flow_schedule)})"
        )
