"""
Polynomial trend fitting for monthly metric series, solving the least-squares normal equations over a design matrix of time-step powers and scoring the fit with R-squared, so that forecasting can extrapolate the trend with a measure of how well it explains the history.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
from numpy.polynomial import polynomial as P

from engine.enums import SolverMethod
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    coefficients: Tuple[float, ...]
    r_squared: float

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1


@dataclass(frozen=True)
class LinearFit:
    slope: float
    intercept: float
    r_squared: float


def _design_matrix(n: int, degree: int) -> np.ndarray:
    # row i holds i**0 .. i**degree; the position in the series is the time variable
    return np.vander(np.arange(n, dtype=float), degree + 1, increasing=True)


def _cramer(a: np.ndarray, b: np.ndarray, eps: float) -> np.ndarray:
    det = a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]
    if abs(det) < eps:
        log.debug("singular 2x2 system (det=%g), returning zero coefficients", det)
        return np.zeros(2)
    return np.array([
        (b[0] * a[1, 1] - b[1] * a[0, 1]) / det,
        (a[0, 0] * b[1] - a[1, 0] * b[0]) / det,
    ])


def _linalg_solve(a: np.ndarray, b: np.ndarray, eps: float) -> np.ndarray:
    size = len(b)
    det = float(np.linalg.det(a))
    if not np.isfinite(det) or abs(det) < eps:
        log.debug("singular %dx%d system (det=%g), returning zero coefficients", size, size, det)
        return np.zeros(size)
    try:
        return np.linalg.solve(a, b)
    except np.linalg.LinAlgError as exc:
        log.debug("%dx%d system could not be solved (%s), returning zero coefficients", size, size, exc)
        return np.zeros(size)


def _diagonal(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    # historical approximation: only the first two coefficients are estimated,
    # each from its own diagonal entry
    solution = np.zeros(len(b))
    solution[0] = b[0] / (a[0, 0] or 1.0)
    solution[1] = b[1] / (a[1, 1] or 1.0)
    return solution


def _solve(a: np.ndarray, b: np.ndarray, method: SolverMethod, eps: float) -> np.ndarray:
    size = len(b)
    if size == 1:
        if abs(a[0, 0]) < eps:
            return np.zeros(1)
        return np.array([b[0] / a[0, 0]])
    if size == 2:
        return _cramer(a, b, eps)
    if method == SolverMethod.diagonal:
        return _diagonal(a, b)
    return _linalg_solve(a, b, eps)


def evaluate(coefficients: Sequence[float], t: float) -> float:
    return float(P.polyval(t, list(coefficients)))


def r_squared(series: Sequence[float], coefficients: Sequence[float]) -> float:
    vals = np.asarray(series, dtype=float)
    if len(vals) == 0:
        return 0.0
    # a constant series is trivially matched by its mean
    if not np.any(vals != vals[0]):
        return 1.0
    predicted = P.polyval(np.arange(len(vals), dtype=float), list(coefficients))
    ss_res = float(np.sum((vals - predicted) ** 2))
    ss_tot = float(np.sum((vals - np.mean(vals)) ** 2))
    return 1.0 - ss_res / ss_tot if ss_tot > 0 else 1.0


def fit(
    series: Sequence[float],
    degree: int,
    method: Optional[SolverMethod | str] = None,
) -> FitResult:
    solver = SolverMethod(method or settings.trend_solver)
    degree = max(0, int(degree))
    vals = np.asarray(series, dtype=float)
    n = len(vals)

    if n < degree + 1:
        log.debug("trend fit skipped: %d points cannot support degree %d", n, degree)
        return FitResult(coefficients=(0.0,), r_squared=0.0)

    x = _design_matrix(n, degree)
    coefficients = _solve(x.T @ x, x.T @ vals, solver, settings.singular_epsilon)
    return FitResult(
        coefficients=tuple(float(c) for c in coefficients),
        r_squared=r_squared(vals, coefficients),
    )


def fit_linear(series: Sequence[float]) -> LinearFit:
    vals = np.asarray(series, dtype=float)
    n = len(vals)
    if n < 2:
        return LinearFit(slope=0.0, intercept=float(vals[0]) if n else 0.0, r_squared=0.0)

    x = np.arange(n, dtype=float)
    sum_x = float(np.sum(x))
    sum_y = float(np.sum(vals))
    sum_xy = float(np.sum(x * vals))
    sum_xx = float(np.sum(x * x))

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared(vals, (intercept, slope)),
    )
