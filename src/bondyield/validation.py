"""Input validation for bond calculation requests.

The numeric core assumes validated inputs. This module turns a raw
request payload (camelCase keys, numbers possibly sent as strings) into
a :class:`~bondyield.core.types.BondInput`, collecting every field error
into a single :class:`BondValidationError`.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from .core.types import BondInput, CouponFrequency

__all__ = [
    "BondValidationError",
    "parse_bond_input",
    "validate_bond_input",
]

_FREQUENCY_MESSAGE = "couponFrequency must be one of: {}".format(
    ", ".join(f.value for f in CouponFrequency)
)


class BondValidationError(ValueError):
    """Raised when one or more request fields are invalid.

    Attributes:
        messages: One message per offending field, in field order.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__(". ".join(self.messages))


def _coerce_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def _coerce_frequency(value: Any) -> CouponFrequency | None:
    if isinstance(value, CouponFrequency):
        return value
    try:
        return CouponFrequency(value)
    except ValueError:
        return None


def _field_errors(
    face_value: float | None,
    annual_coupon_rate: float | None,
    market_price: float | None,
    years_to_maturity: float | None,
    coupon_frequency: CouponFrequency | None,
) -> list[str]:
    errors: list[str] = []
    # (field, value, zero allowed)
    numeric_fields = (
        ("faceValue", face_value, False),
        ("annualCouponRate", annual_coupon_rate, True),
        ("marketPrice", market_price, False),
        ("yearsToMaturity", years_to_maturity, False),
    )
    for name, value, zero_allowed in numeric_fields:
        if value is None:
            errors.append(f"{name} must be a number conforming to the specified constraints")
        elif zero_allowed and value < 0:
            errors.append(f"{name} must be greater than or equal to 0")
        elif not zero_allowed and value <= 0:
            errors.append(f"{name} must be greater than 0")

    if coupon_frequency is None:
        errors.append(_FREQUENCY_MESSAGE)
    elif years_to_maturity is not None and years_to_maturity > 0:
        periods = years_to_maturity * coupon_frequency.periods_per_year
        if periods != int(periods):
            errors.append("yearsToMaturity must give a whole number of coupon periods")
    return errors


def parse_bond_input(payload: Mapping[str, Any]) -> BondInput:
    """Build a validated :class:`BondInput` from a request payload.

    Args:
        payload: Mapping with ``faceValue``, ``annualCouponRate``,
            ``marketPrice``, ``yearsToMaturity`` and ``couponFrequency``.
            Numeric strings such as ``"1000"`` are accepted.

    Returns:
        The validated bond inputs.

    Raises:
        BondValidationError: Listing every invalid or missing field.
    """
    face_value = _coerce_number(payload.get("faceValue"))
    annual_coupon_rate = _coerce_number(payload.get("annualCouponRate"))
    market_price = _coerce_number(payload.get("marketPrice"))
    years_to_maturity = _coerce_number(payload.get("yearsToMaturity"))
    coupon_frequency = _coerce_frequency(payload.get("couponFrequency"))

    errors = _field_errors(
        face_value, annual_coupon_rate, market_price, years_to_maturity, coupon_frequency,
    )
    if errors:
        raise BondValidationError(errors)

    return BondInput(
        face_value=face_value,
        annual_coupon_rate=annual_coupon_rate,
        market_price=market_price,
        years_to_maturity=years_to_maturity,
        coupon_frequency=coupon_frequency,
    )


def validate_bond_input(bond: BondInput) -> None:
    """Check an already-built :class:`BondInput` against the request rules.

    Raises:
        BondValidationError: Listing every invalid field.
    """
    errors = _field_errors(
        _coerce_number(bond.face_value),
        _coerce_number(bond.annual_coupon_rate),
        _coerce_number(bond.market_price),
        _coerce_number(bond.years_to_maturity),
        _coerce_frequency(bond.coupon_frequency),
    )
    if errors:
        raise BondValidationError(errors)
