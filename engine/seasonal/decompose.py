"""
Seasonal decomposition for monthly series: detrends with a moving average, averages the residual by position in the year to build a seasonal index, and flags whether that index is large enough to be worth blending into forecasts.

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

from engine.trend.smoothing import moving_average
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeasonalProfile:
    index: Tuple[float, ...]
    significant: bool

    def offset(self, t: int) -> float:
        if not self.index:
            return 0.0
        return self.index[t % len(self.index)]


@dataclass(frozen=True)
class Decomposition:
    seasonal: Tuple[float, ...]
    trend: Tuple[float, ...]
    index: Tuple[float, ...]
    significant: bool

    @property
    def profile(self) -> SeasonalProfile:
        return SeasonalProfile(index=self.index, significant=self.significant)


def seasonal_index(detrended: Sequence[float], period: int) -> Tuple[float, ...]:
    sums = np.zeros(period)
    counts = np.zeros(period)
    for i, v in enumerate(detrended):
        sums[i % period] += v
        counts[i % period] += 1
    # positions never observed keep a zero offset
    averaged = np.divide(sums, counts, out=np.zeros(period), where=counts > 0)
    return tuple(float(v) for v in averaged)


def is_significant(index: Sequence[float], threshold: float | None = None) -> bool:
    if threshold is None:
        threshold = settings.seasonality_threshold
    if len(index) == 0:
        return False
    return float(np.mean(np.square(index))) > threshold


def decompose(series: Sequence[float], period: Optional[int] = None) -> Decomposition:
    if period is None:
        period = settings.season_length
    vals = np.asarray(series, dtype=float)
    n = len(vals)

    if period < 1 or n < period:
        log.debug("seasonal decomposition skipped: %d points for period %d", n, period)
        return Decomposition(seasonal=(), trend=(), index=(), significant=False)

    trend = np.asarray(moving_average(vals, settings.seasonal_smoothing_window))
    index = seasonal_index(vals - trend, period)
    seasonal = tuple(index[i % period] for i in range(n))

    return Decomposition(
        seasonal=seasonal,
        trend=tuple(float(v) for v in trend),
        index=index,
        significant=is_significant(index),
    )
