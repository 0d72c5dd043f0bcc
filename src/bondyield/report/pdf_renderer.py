"""PDF renderer for cash-flow schedules.

Lays the formatted schedule rows out as a table using matplotlib's PDF
backend, splitting long schedules across pages.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

from ..core.types import CashFlowScheduleEntry
from ..viz.theme import SCHEDULE_COLOURS
from .export import build_cash_flow_rows

__all__ = ["export_schedule_pdf"]

_ROWS_PER_PAGE = 40


def export_schedule_pdf(
    schedule: Sequence[CashFlowScheduleEntry],
    path: str | Path,
    title: str = "Cash Flow Schedule",
) -> Path:
    """Render the formatted schedule to a PDF file.

    Args:
        schedule: Schedule entries ordered by period.
        path: Destination file.
        title: Heading printed on each page.

    Returns:
        The path written.
    """
    rows = build_cash_flow_rows(schedule)
    headers, body = rows[0], rows[1:]
    pages = [body[i:i + _ROWS_PER_PAGE] for i in range(0, len(body), _ROWS_PER_PAGE)] or [[]]

    out = Path(path)
    with PdfPages(out) as pdf:
        for page_rows in pages:
            fig, ax = plt.subplots(figsize=(8.5, 11))
            ax.axis("off")
            ax.set_title(title, loc="left", fontsize=14, color=SCHEDULE_COLOURS["text"])
            table = ax.table(
                cellText=page_rows or [[""] * len(headers)],
                colLabels=headers,
                loc="upper center",
                cellLoc="right",
                colLoc="center",
            )
            table.auto_set_font_size(False)
            table.set_fontsize(9)
            for (row, _col), cell in table.get_celld().items():
                cell.set_edgecolor(SCHEDULE_COLOURS["gridline"])
                if row == 0:
                    cell.set_facecolor(SCHEDULE_COLOURS["coupon"])
                    cell.set_text_props(color=SCHEDULE_COLOURS["background"], fontweight="bold")
            pdf.savefig(fig)
            plt.close(fig)
    return out
