"""BondYield: fixed-income bond metrics from five inputs.

Computes current yield, yield to maturity (by bisection), total
interest, premium/discount classification and a periodic cash-flow
schedule, with CSV/PDF export and a cash-flow chart.
"""

__version__ = "0.1.0"

from .core.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from .core.types import (
    BondInput,
    BondMetricsResult,
    CashFlowScheduleEntry,
    ConvergenceError,
    CouponFrequency,
    PeriodDecomposition,
    PremiumOrDiscount,
    YTMSolution,
)
from .instruments.bond_pricing import bond_price, decompose_periods, price_at_periodic_rate
from .instruments.ytm import solve_ytm, solve_ytm_detailed
from .metrics import (
    annual_coupon,
    calculate_bond_metrics,
    current_yield,
    premium_or_discount,
    total_interest,
)
from .schedule import generate_cash_flow_schedule
from .service import calculate
from .validation import BondValidationError, parse_bond_input, validate_bond_input

__all__ = [
    # Types
    "BondInput",
    "BondMetricsResult",
    "CashFlowScheduleEntry",
    "CouponFrequency",
    "PeriodDecomposition",
    "PremiumOrDiscount",
    "YTMSolution",
    "ConvergenceError",
    # Configuration
    "SolverConfig",
    "DEFAULT_SOLVER_CONFIG",
    # Pricing and yield
    "decompose_periods",
    "price_at_periodic_rate",
    "bond_price",
    "solve_ytm",
    "solve_ytm_detailed",
    # Metrics and schedule
    "annual_coupon",
    "current_yield",
    "total_interest",
    "premium_or_discount",
    "generate_cash_flow_schedule",
    "calculate_bond_metrics",
    # Request boundary
    "BondValidationError",
    "parse_bond_input",
    "validate_bond_input",
    "calculate",
]
