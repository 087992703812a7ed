"""
Test cases for polynomial trend fitting, including degenerate fallbacks, exact recovery of linear and higher-order trends, the diagonal solver approximation and R-squared scoring.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest
from numpy.polynomial import polynomial as P

from config import settings
from engine.enums import SolverMethod
from engine.trend.fit import _cramer, _linalg_solve, evaluate, fit, fit_linear, r_squared


def test_fit_short_series_returns_fallback():
    res = fit([5.0], 1)
    assert res.coefficients == (0.0,)
    assert res.r_squared == 0.0

    empty = fit([], 0)
    assert empty.coefficients == (0.0,)
    assert empty.r_squared == 0.0


def test_fit_constant_series_is_perfect():
    res = fit([4, 4, 4, 4], 1)
    assert res.r_squared == 1.0
    assert res.coefficients == pytest.approx((4.0, 0.0), abs=1e-9)

    # float means can drift by an ulp; a constant series still scores exactly 1
    assert fit([0.1] * 5, 2).r_squared == 1.0


def test_fit_linear_series_recovers_slope_and_intercept():
    res = fit([1, 3, 5, 7, 9], 1)
    assert len(res.coefficients) == 2
    assert res.coefficients == pytest.approx((1.0, 2.0), rel=1e-9)
    assert res.r_squared == pytest.approx(1.0, rel=1e-12)

    line = fit_linear([1, 3, 5, 7, 9])
    assert line.slope == pytest.approx(2.0)
    assert line.intercept == pytest.approx(1.0)
    assert line.r_squared == pytest.approx(1.0)


def test_fit_quadratic_and_cubic_with_linalg_solver():
    ts = range(6)
    quad = [t * t + 2 * t + 3 for t in ts]
    res = fit(quad, 2, method=SolverMethod.gaussian)
    assert res.degree == 2
    assert res.coefficients == pytest.approx((3.0, 2.0, 1.0), abs=1e-6)
    assert res.r_squared == pytest.approx(1.0)

    cubic = [0.5 * t ** 3 - t + 2 for t in range(8)]
    res = fit(cubic, 3)
    assert res.coefficients == pytest.approx((2.0, -1.0, 0.0, 0.5), abs=1e-6)


def test_fit_diagonal_solver_approximation(monkeypatch):
    monkeypatch.setattr(settings, "trend_solver", "diagonal")
    res = fit([1, 2, 3], 2)
    # c0 = sum(y) / n, c1 = sum(t*y) / sum(t^2), higher orders left at zero
    assert res.coefficients == pytest.approx((2.0, 1.6, 0.0))
    assert len(res.coefficients) == 3


def test_singular_systems_return_zero_coefficients():
    a = np.array([[1.0, 2.0], [2.0, 4.0]])
    assert list(_cramer(a, np.array([1.0, 2.0]), 1e-10)) == [0.0, 0.0]

    a3 = np.array([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 1.0, 1.0]])
    assert list(_linalg_solve(a3, np.array([1.0, 2.0, 3.0]), 1e-10)) == [0.0, 0.0, 0.0]


def test_negative_degree_fits_the_mean():
    res = fit([1, 2, 3], -2)
    assert res.coefficients == pytest.approx((2.0,))
    assert res.r_squared == pytest.approx(0.0)


def test_r_squared_can_be_negative():
    assert r_squared([1, 2, 3], [10.0]) == pytest.approx(-96.0)
    assert r_squared([], [1.0]) == 0.0


def test_evaluate_polynomial():
    assert evaluate((1, 2, 3), 2) == pytest.approx(17.0)
    assert evaluate((5,), 100) == pytest.approx(5.0)


def test_fit_linear_short_series():
    empty = fit_linear([])
    assert (empty.slope, empty.intercept, empty.r_squared) == (0.0, 0.0, 0.0)
    single = fit_linear([7])
    assert (single.slope, single.intercept, single.r_squared) == (0.0, 7.0, 0.0)


def test_fit_matches_numpy_least_squares():
    vals = [12.0, 15.5, 14.0, 19.0, 23.5, 22.0, 27.0, 31.5, 30.0, 36.0]
    res = fit(vals, 3)
    expected = P.polyfit(np.arange(len(vals), dtype=float), vals, 3)
    assert res.coefficients == pytest.approx(tuple(expected), rel=1e-6, abs=1e-8)


def test_linalg_solve_failure_returns_zero_coefficients(monkeypatch):
    def refuse(a, b):
        raise np.linalg.LinAlgError("Singular matrix")

    monkeypatch.setattr(np.linalg, "solve", refuse)
    a = np.diag([2.0, 3.0, 4.0])
    assert list(_linalg_solve(a, np.array([1.0, 1.0, 1.0]), 1e-10)) == [0.0, 0.0, 0.0]
