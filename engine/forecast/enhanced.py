"""
Blended forecasting for monthly metrics: extrapolates a best-fit polynomial trend, adds the yearly seasonal offset when one is significant, scales by an oscillating growth adjustment and injects noise bounded by the fit quality, then labels the trend of the most recent observations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from engine.enums import TrendDirection
from engine.forecast.models import (
    Clock,
    ForecastPoint,
    ForecastResult,
    ObservedPoint,
    RandomSource,
    default_random,
    period_label,
    system_clock,
)
from engine.seasonal.decompose import decompose
from engine.trend.fit import evaluate, fit
from config import settings

log = logging.getLogger(__name__)


def trend_direction(values: Sequence[float]) -> TrendDirection:
    recent = list(values)[-settings.trend_lookback:]
    if len(recent) < 2:
        return TrendDirection.stable
    return TrendDirection.from_recent(recent[0], recent[-1])


def growth_multiplier(t: int) -> float:
    return settings.growth_base + settings.growth_amplitude * math.sin(t)


def forecast(
    observed: Sequence[ObservedPoint],
    horizon: int | None = None,
    clock: Optional[Clock] = None,
    rng: Optional[RandomSource] = None,
) -> ForecastResult:
    if horizon is None:
        horizon = settings.default_horizon
    values = [float(p.value) for p in observed]
    n = len(values)

    if n < max(1, settings.min_observations):
        log.debug("forecast skipped: %d observations, need %d", n, settings.min_observations)
        return ForecastResult.empty()

    if clock is None:
        clock = system_clock
    if rng is None:
        rng = default_random()

    poly = fit(values, min(settings.max_trend_degree, n - 1))
    profile = decompose(values).profile
    direction = trend_direction(values)
    log.debug(
        "forecast fit: degree=%d r2=%.4f seasonal=%s trend=%s",
        poly.degree, poly.r_squared, profile.significant, direction.value,
    )

    confidence = min(poly.r_squared, settings.confidence_cap)
    floor = values[-1] * settings.floor_ratio
    now = clock()

    points: List[ForecastPoint] = []
    for i in range(1, horizon + 1):
        t = n + i - 1
        value = evaluate(poly.coefficients, t)
        if profile.significant:
            value += profile.offset(t)

        uncertainty = (1 - confidence) * value * settings.uncertainty_scale
        if settings.growth_adjustment:
            value *= growth_multiplier(t)
        value += (rng.random() - 0.5) * uncertainty

        points.append(ForecastPoint(period=period_label(now, i), value=max(value, floor)))

    return ForecastResult(
        points=tuple(points),
        confidence=poly.r_squared,
        trend=direction,
        seasonal=profile.significant,
        accuracy=min(poly.r_squared * 100, settings.accuracy_cap),
    )
