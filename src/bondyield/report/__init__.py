"""Schedule export for downstream presentation.

Provides a raw pandas view of the cash-flow schedule plus formatted
CSV and PDF output with two-decimal currency amounts.
"""

from __future__ import annotations

from .export import (
    CSV_HEADERS,
    build_cash_flow_rows,
    export_schedule_csv,
    format_currency,
    format_payment_date,
    schedule_to_frame,
)
from .pdf_renderer import export_schedule_pdf

__all__ = [
    "CSV_HEADERS",
    "format_currency",
    "format_payment_date",
    "schedule_to_frame",
    "build_cash_flow_rows",
    "export_schedule_csv",
    "export_schedule_pdf",
]
