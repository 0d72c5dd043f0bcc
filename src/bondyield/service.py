"""Request-level entry point: payload in, camelCase response out.

A transport layer (HTTP handler, queue consumer, CLI) passes the decoded
request body to :func:`calculate` and serialises the returned dict.
:class:`~bondyield.validation.BondValidationError` maps to a client error
and :class:`~bondyield.core.types.ConvergenceError` to an unprocessable
input; nothing else is raised for well-formed payloads.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from .core.types import BondMetricsResult
from .metrics import calculate_bond_metrics
from .validation import BondValidationError, parse_bond_input

__all__ = [
    "calculate",
    "calculate_result",
]

logger = logging.getLogger(__name__)


def calculate_result(
    payload: Mapping[str, Any],
    start: datetime | None = None,
) -> BondMetricsResult:
    """Validate ``payload`` and compute its :class:`BondMetricsResult`.

    Raises:
        BondValidationError: If the payload is invalid.
        ConvergenceError: If the YTM solver does not converge.
    """
    try:
        bond = parse_bond_input(payload)
    except BondValidationError as exc:
        logger.warning("Rejected bond payload: %s", exc)
        raise

    logger.info("Calculating bond metrics for %r", bond)
    return calculate_bond_metrics(bond, start=start)


def calculate(
    payload: Mapping[str, Any],
    start: datetime | None = None,
) -> dict[str, Any]:
    """Validate ``payload``, compute its metrics and return the response body.

    Args:
        payload: Request body with ``faceValue``, ``annualCouponRate``,
            ``marketPrice``, ``yearsToMaturity`` and ``couponFrequency``.
        start: Anchor for schedule payment dates. Defaults to now (UTC).

    Returns:
        Dict with ``currentYield``, ``ytm``, ``totalInterest``,
        ``premiumOrDiscount`` and ``cashFlowSchedule``.
    """
    return calculate_result(payload, start=start).to_dict()
