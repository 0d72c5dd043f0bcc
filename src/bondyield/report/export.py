"""Cash-flow schedule export: DataFrame, display rows and CSV.

Display formatting rounds to two decimals and renders currency amounts;
the underlying schedule values are never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import numpy as np
import pandas as pd

from ..core.config import DISPLAY_CURRENCY
from ..core.types import CashFlowScheduleEntry
from ..metrics import round_half_up

__all__ = [
    "CSV_HEADERS",
    "format_currency",
    "format_payment_date",
    "schedule_to_frame",
    "build_cash_flow_rows",
    "export_schedule_csv",
]

CSV_HEADERS: tuple[str, ...] = (
    "Period",
    "Payment Date",
    "Coupon Payment",
    "Cumulative Interest",
    "Remaining Principal",
)


def format_currency(value: float) -> str:
    """Format an amount for display, e.g. ``"AED 1,000.00"``.

    Args:
        value: Amount in the display currency.

    Returns:
        Formatted string, or ``"N/A"`` for non-finite values.
    """
    if np.isnan(value) or np.isinf(value):
        return "N/A"
    sign = "-" if value < 0 else ""
    return f"{sign}{DISPLAY_CURRENCY} {abs(value):,.2f}"


def format_payment_date(value: datetime) -> str:
    """Format a payment date as ``DD/MM/YYYY``."""
    return value.strftime("%d/%m/%Y")


def schedule_to_frame(schedule: Sequence[CashFlowScheduleEntry]) -> pd.DataFrame:
    """Tabulate a schedule with raw (unrounded) values, indexed by period.

    Args:
        schedule: Schedule entries ordered by period.

    Returns:
        DataFrame with ``payment_date``, ``coupon_payment``,
        ``cumulative_interest`` and ``remaining_principal`` columns.
    """
    frame = pd.DataFrame(
        {
            "payment_date": [entry.payment_date for entry in schedule],
            "coupon_payment": [entry.coupon_payment for entry in schedule],
            "cumulative_interest": [entry.cumulative_interest for entry in schedule],
            "remaining_principal": [entry.remaining_principal for entry in schedule],
        },
        index=pd.Index([entry.period for entry in schedule], name="period"),
    )
    return frame.astype({
        "coupon_payment": float,
        "cumulative_interest": float,
        "remaining_principal": float,
    })


def build_cash_flow_rows(schedule: Sequence[CashFlowScheduleEntry]) -> list[list[str]]:
    """Header row followed by one formatted row per schedule entry.

    Args:
        schedule: Schedule entries ordered by period.

    Returns:
        Rows of display strings, headers first.
    """
    rows = [list(CSV_HEADERS)]
    for entry in schedule:
        rows.append([
            str(entry.period),
            format_payment_date(entry.payment_date),
            format_currency(round_half_up(entry.coupon_payment)),
            format_currency(round_half_up(entry.cumulative_interest)),
            format_currency(round_half_up(entry.remaining_principal)),
        ])
    return rows


def export_schedule_csv(
    schedule: Sequence[CashFlowScheduleEntry],
    path: str | Path,
) -> Path:
    """Write the formatted schedule to a CSV file.

    Cells containing commas, quotes or newlines are quoted.

    Args:
        schedule: Schedule entries ordered by period.
        path: Destination file.

    Returns:
        The path written.
    """
    rows = build_cash_flow_rows(schedule)
    frame = pd.DataFrame(rows[1:], columns=rows[0])
    out = Path(path)
    frame.to_csv(out, index=False, lineterminator="\n")
    return out
