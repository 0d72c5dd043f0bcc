"""Tests for bondyield.instruments.ytm."""

from __future__ import annotations

import logging

import pytest
from scipy.optimize import brentq

from bondyield.core.config import (
    BISECTION_MAX_ITERATIONS,
    BISECTION_TOLERANCE_ABS,
    BISECTION_TOLERANCE_REL,
    SolverConfig,
)
from bondyield.core.types import ConvergenceError, CouponFrequency
from bondyield.instruments.bond_pricing import bond_price, price_at_periodic_rate
from bondyield.instruments.ytm import solve_ytm, solve_ytm_detailed

ANNUAL = CouponFrequency.ANNUAL
SEMI = CouponFrequency.SEMI_ANNUAL
PRICE_TOLERANCE = 0.0001


def _assert_reproduces_price(face, rate, price, years, freq):
    ytm = solve_ytm(face, rate, price, years, freq)
    implied = bond_price(face, rate, ytm, years, freq)
    assert abs(implied - price) <= PRICE_TOLERANCE
    return ytm


# ---------------------------------------------------------------------------
# Annual frequency
# ---------------------------------------------------------------------------

class TestAnnual:
    def test_discount(self):
        ytm = _assert_reproduces_price(1000, 5, 950, 5, ANNUAL)
        assert ytm > 5

    def test_premium(self):
        ytm = _assert_reproduces_price(1000, 5, 1050, 5, ANNUAL)
        assert ytm < 5

    def test_par(self):
        ytm = _assert_reproduces_price(1000, 5, 1000, 5, ANNUAL)
        assert abs(ytm - 5) < 0.01

    def test_known_value(self):
        # 5y 5% annual bond at 950 yields about 6.19%
        assert solve_ytm(1000, 5, 950, 5, ANNUAL) == pytest.approx(6.19, abs=0.01)


# ---------------------------------------------------------------------------
# Semi-annual frequency
# ---------------------------------------------------------------------------

class TestSemiAnnual:
    def test_discount(self):
        ytm = _assert_reproduces_price(1000, 6, 980, 5, SEMI)
        assert ytm > 6

    def test_premium(self):
        ytm = _assert_reproduces_price(1000, 6, 1020, 5, SEMI)
        assert ytm < 6

    def test_par(self):
        ytm = _assert_reproduces_price(1000, 5, 1000, 10, SEMI)
        assert abs(ytm - 5) < 0.01

    def test_annualises_by_doubling(self):
        solution = solve_ytm_detailed(5000, 4, 4800, 10, SEMI)
        assert solution.annual_yield == pytest.approx(solution.periodic_rate * 200)

    def test_scenario_c_price_reproduction(self):
        ytm = _assert_reproduces_price(5000, 4, 4800, 10, SEMI)
        assert ytm > 4


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("freq", [ANNUAL, SEMI])
@pytest.mark.parametrize(
    ("face", "rate", "years"),
    [(1000, 5, 5), (100, 0, 3), (5000, 4, 10), (250, 12.5, 2), (1000, 7.25, 30)],
)
def test_par_round_trip(face, rate, years, freq):
    ytm = solve_ytm(face, rate, face, years, freq)
    assert abs(ytm - rate) < 0.01


@pytest.mark.parametrize("freq", [ANNUAL, SEMI])
def test_yield_falls_as_price_rises(freq):
    prices = [850, 900, 950, 1000, 1050, 1100]
    ytms = [solve_ytm(1000, 5, p, 7, freq) for p in prices]
    assert all(a > b for a, b in zip(ytms, ytms[1:]))


@pytest.mark.parametrize(
    ("face", "rate", "price", "years", "freq"),
    [(1000, 5, 950, 5, ANNUAL), (1000, 6, 1020, 5, SEMI), (5000, 4, 4800, 10, SEMI), (100, 0, 70, 8, ANNUAL)],
)
def test_matches_independent_root_finder(face, rate, price, years, freq):
    ppy = freq.periods_per_year
    n = years * ppy
    coupon = face * rate / 100 / ppy
    root = brentq(lambda r: price_at_periodic_rate(face, coupon, n, r) - price, 0.0, 1.0, xtol=1e-15)
    solution = solve_ytm_detailed(face, rate, price, years, freq)
    assert solution.periodic_rate == pytest.approx(root, abs=1e-6)


def test_detailed_solution_reports_tolerance_acceptance():
    solution = solve_ytm_detailed(1000, 5, 950, 5, ANNUAL)
    assert solution.criterion in {"absolute", "relative"}
    assert 1 <= solution.iterations < BISECTION_MAX_ITERATIONS
    assert abs(solution.price_error) <= PRICE_TOLERANCE


def test_bracket_floor_accepts_when_tolerances_are_zero(caplog):
    config = SolverConfig(abs_tolerance=0.0, rel_tolerance=0.0)
    with caplog.at_level(logging.WARNING, logger="bondyield.instruments.ytm"):
        solution = solve_ytm_detailed(1000, 5, 950, 5, ANNUAL, config=config)
    assert solution.criterion == "bracket"
    assert solution.iterations < 100
    assert solution.annual_yield == pytest.approx(solve_ytm(1000, 5, 950, 5, ANNUAL), abs=1e-4)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("bracket collapsed" in r.getMessage() for r in warnings)


@pytest.mark.parametrize(
    ("face", "rate", "price", "years", "freq"),
    [
        (1000, 5, 950, 5, ANNUAL),
        (10000, 3, 9999, 20, SEMI),
        (1_000_000, 5, 950_000, 5, ANNUAL),
        (50_000_000, 4.5, 48_000_000, 10, SEMI),
    ],
)
def test_price_error_within_accepted_bound(face, rate, price, years, freq):
    # Absolute bound up to a price of 10,000, relative bound above it.
    solution = solve_ytm_detailed(face, rate, price, years, freq)
    bound = max(BISECTION_TOLERANCE_ABS, BISECTION_TOLERANCE_REL * price)
    assert abs(solution.price_error) <= bound
    if price <= 10_000:
        assert abs(solution.price_error) <= PRICE_TOLERANCE


# ---------------------------------------------------------------------------
# Convergence failure
# ---------------------------------------------------------------------------

class TestConvergenceFailure:
    def test_zero_market_price(self):
        with pytest.raises(ConvergenceError, match="YTM failed to converge within 2000 iterations"):
            solve_ytm(1000, 5, 0, 5, ANNUAL)

    def test_error_carries_cap(self):
        with pytest.raises(ConvergenceError) as exc_info:
            solve_ytm(1000, 5, 0, 5, SEMI)
        assert exc_info.value.max_iterations == BISECTION_MAX_ITERATIONS

    def test_negative_yield_is_outside_domain(self):
        # Undiscounted cash flows total 1250, so 1300 needs a negative yield.
        with pytest.raises(ConvergenceError):
            solve_ytm(1000, 5, 1300, 5, ANNUAL)

    def test_custom_cap(self):
        config = SolverConfig(max_iterations=5)
        with pytest.raises(ConvergenceError, match="within 5 iterations") as exc_info:
            solve_ytm(1000, 5, 950, 5, ANNUAL, config=config)
        assert exc_info.value.max_iterations == 5

    def test_is_runtime_error(self):
        assert issubclass(ConvergenceError, RuntimeError)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="bondyield.instruments.ytm"):
            with pytest.raises(ConvergenceError):
                solve_ytm(1000, 5, 0, 5, ANNUAL)
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_price_below_domain_floor(self):
        # At r = 1 the 30y 5% annual bond is still worth about 50.
        with pytest.raises(ConvergenceError) as exc_info:
            solve_ytm(1000, 5, 40, 30, ANNUAL)
        assert exc_info.value.max_iterations == BISECTION_MAX_ITERATIONS

    def test_out_of_domain_log_names_search_domain(self, caplog):
        with caplog.at_level(logging.ERROR, logger="bondyield.instruments.ytm"):
            with pytest.raises(ConvergenceError, match="within 2000 iterations"):
                solve_ytm(1000, 5, 40, 30, ANNUAL)
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
        assert len(messages) == 1
        assert "outside the search domain [0, 1]" in messages[0]
