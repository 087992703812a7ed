"""
Linear forecasting path that blends the fitted straight line with a momentum projection from the last observation, weighting the two by fit quality.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from engine.forecast.models import (
    Clock,
    ForecastPoint,
    ObservedPoint,
    RandomSource,
    default_random,
    period_label,
    system_clock,
)
from engine.trend.fit import fit_linear
from config import settings


def forecast_linear(
    observed: Sequence[ObservedPoint],
    horizon: int | None = None,
    clock: Optional[Clock] = None,
    rng: Optional[RandomSource] = None,
) -> List[ForecastPoint]:
    if horizon is None:
        horizon = settings.default_horizon
    values = [float(p.value) for p in observed]
    if not values:
        return []
    if clock is None:
        clock = system_clock
    if rng is None:
        rng = default_random()

    line = fit_linear(values)
    low, high = settings.linear_strength_bounds
    strength = min(max(line.r_squared, low), high)
    noise_reduction = 1 - line.r_squared * settings.linear_noise_damping
    last_index = len(values) - 1
    now = clock()

    points: List[ForecastPoint] = []
    for i in range(1, horizon + 1):
        on_line = line.slope * (last_index + i) + line.intercept
        momentum = values[-1] + line.slope * i
        value = on_line * strength + momentum * (1 - strength)
        value += value * settings.linear_variation_scale * noise_reduction * (rng.random() - 0.5)
        points.append(ForecastPoint(period=period_label(now, i), value=max(0.0, value)))
    return points
