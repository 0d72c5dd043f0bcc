"""Cash-flow schedule chart."""

from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..core.types import CashFlowScheduleEntry
from .theme import SCHEDULE_COLOURS, apply_schedule_theme, label_series_end

__all__ = ["plot_cash_flow_schedule"]


def plot_cash_flow_schedule(
    schedule: Sequence[CashFlowScheduleEntry],
    face_value: float | None = None,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot coupon payments per period with the redemption and running interest.

    Coupons are bars; principal repaid in the final period is stacked on
    the last bar; cumulative interest is a line on a secondary axis.

    Args:
        schedule: Schedule entries ordered by period.
        face_value: Principal repaid at maturity. Defaults to the principal
            outstanding during the first period; required for a
            single-period schedule.
        figsize: Figure size.

    Returns:
        Tuple of (Figure, Axes) for the coupon axis.

    Raises:
        ValueError: If the schedule is empty, or has one period and no
            ``face_value`` is given.
    """
    if not schedule:
        raise ValueError("schedule must not be empty")
    if face_value is None:
        if len(schedule) == 1:
            raise ValueError("face_value is required for a single-period schedule")
        face_value = schedule[0].remaining_principal

    apply_schedule_theme()
    periods = np.array([entry.period for entry in schedule])
    coupons = np.array([entry.coupon_payment for entry in schedule], dtype=float)
    cumulative = np.array([entry.cumulative_interest for entry in schedule], dtype=float)

    redemption = np.zeros_like(coupons)
    redemption[-1] = face_value

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.bar(periods, coupons, color=SCHEDULE_COLOURS["coupon"], width=0.6)
    ax.bar(periods, redemption, bottom=coupons, color=SCHEDULE_COLOURS["principal"], width=0.6)
    if face_value:
        label_series_end(ax, periods[-1], coupons[-1] + face_value, " Principal",
                         colour=SCHEDULE_COLOURS["principal"])

    ax2 = ax.twinx()
    ax2.plot(periods, cumulative, color=SCHEDULE_COLOURS["cumulative"], marker="o")
    ax2.grid(False)
    ax2.spines["right"].set_visible(True)
    label_series_end(ax2, periods[-1], cumulative[-1], " Cumulative interest",
                     colour=SCHEDULE_COLOURS["cumulative"])

    ax.set_xlabel("Period")
    ax.set_ylabel("Payment")
    ax2.set_ylabel("Cumulative interest")
    ax.set_xticks(periods)
    ax.set_title("Cash Flow Schedule")
    fig.tight_layout()
    return fig, ax
