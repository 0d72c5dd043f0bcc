"""Colours and rcParams shared by the cash-flow chart and the PDF schedule table."""

from __future__ import annotations

import matplotlib as mpl
from matplotlib.axes import Axes

__all__ = [
    "SCHEDULE_COLOURS",
    "apply_schedule_theme",
    "label_series_end",
]

# One colour per schedule series, plus the neutrals used for text and rules.
SCHEDULE_COLOURS: dict[str, str] = {
    "coupon": "#4E79A7",
    "principal": "#59A14F",
    "cumulative": "#F28E2B",
    "text": "#4E4E4E",
    "rule": "#999999",
    "gridline": "#E8E8E8",
    "background": "#FFFFFF",
}


def apply_schedule_theme() -> None:
    """Set the rcParams the schedule chart relies on."""
    mpl.rcParams.update({
        "figure.facecolor": SCHEDULE_COLOURS["background"],
        "axes.facecolor": SCHEDULE_COLOURS["background"],
        "axes.edgecolor": SCHEDULE_COLOURS["rule"],
        "axes.labelcolor": SCHEDULE_COLOURS["text"],
        "axes.titlesize": 13,
        "axes.spines.top": False,
        "axes.spines.right": False,
        # Payment amounts are read against horizontal rules only
        "axes.grid": True,
        "axes.grid.axis": "y",
        "grid.color": SCHEDULE_COLOURS["gridline"],
        "xtick.color": SCHEDULE_COLOURS["rule"],
        "ytick.color": SCHEDULE_COLOURS["rule"],
        "savefig.dpi": 150,
    })


def label_series_end(ax: Axes, x: float, y: float, text: str, colour: str) -> None:
    """Write a series name beside its last point instead of using a legend."""
    ax.annotate(text, xy=(x, y), fontsize=10, color=colour, ha="left", va="center")
