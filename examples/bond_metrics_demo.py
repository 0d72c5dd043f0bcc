#!/usr/bin/env python3
"""Bond metrics demo: three reference bonds, their yields, and a cash-flow chart.

Prints the headline metrics for each bond, writes the semi-annual bond's
schedule to CSV and PDF, and saves its cash-flow chart to docs/images/.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from bondyield import BondInput, CouponFrequency, calculate_bond_metrics, solve_ytm_detailed
from bondyield.report import export_schedule_csv, export_schedule_pdf
from bondyield.viz.cashflows import plot_cash_flow_schedule

OUT = os.path.join(os.path.dirname(__file__), "..", "docs", "images")
os.makedirs(OUT, exist_ok=True)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

START = datetime(2025, 1, 1, tzinfo=timezone.utc)

BONDS = {
    "A: 5y 5% annual at 950": BondInput(1000, 5, 950, 5, CouponFrequency.ANNUAL),
    "B: 5y 5% annual at par": BondInput(1000, 5, 1000, 5, CouponFrequency.ANNUAL),
    "C: 10y 4% semi-annual at 4800": BondInput(5000, 4, 4800, 10, CouponFrequency.SEMI_ANNUAL),
}

for label, bond in BONDS.items():
    result = calculate_bond_metrics(bond, start=START)
    solution = solve_ytm_detailed(
        bond.face_value, bond.annual_coupon_rate, bond.market_price,
        bond.years_to_maturity, bond.coupon_frequency,
    )
    print(f"\n{label}")
    print(f"  current yield   {result.current_yield:>8.2f}%")
    print(f"  yield to mat.   {result.ytm:>8.2f}%  ({solution.iterations} iterations, {solution.criterion})")
    print(f"  total interest  {result.total_interest:>8,.2f}")
    print(f"  classification  {result.premium_or_discount.value}")

# ============================================================
# Schedule export and chart for bond C
# ============================================================
result_c = calculate_bond_metrics(BONDS["C: 10y 4% semi-annual at 4800"], start=START)
export_schedule_csv(result_c.cash_flow_schedule, os.path.join(OUT, "cash_flow_schedule.csv"))
export_schedule_pdf(result_c.cash_flow_schedule, os.path.join(OUT, "cash_flow_schedule.pdf"))

fig, ax = plot_cash_flow_schedule(result_c.cash_flow_schedule)
fig.savefig(os.path.join(OUT, "cash_flow_schedule.png"))
plt.close(fig)
print(f"\nSaved schedule exports and chart to {os.path.abspath(OUT)}")
