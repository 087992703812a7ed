"""
Synthetic monthly history for demos and tests. This stands in for a real historical-data provider: it compounds a baseline by a directional drift, a mild yearly wave and random volatility.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from engine.forecast.models import ObservedPoint, RandomSource, default_random
from config import DEMO_METRICS, MONTH_NAMES, SYNTHETIC_TREND_FACTORS, settings

log = logging.getLogger(__name__)


def generate_historical(
    base_value: float,
    trend: str,
    volatility: float = 0.1,
    rng: Optional[RandomSource] = None,
    periods: int | None = None,
) -> List[ObservedPoint]:
    if periods is None:
        periods = settings.synthetic_periods
    if rng is None:
        rng = default_random()
    factor = SYNTHETIC_TREND_FACTORS.get(trend, SYNTHETIC_TREND_FACTORS["stable"])

    data: List[ObservedPoint] = []
    current = float(base_value)
    for i in range(periods):
        seasonal = 1 + settings.synthetic_seasonal_amplitude * math.sin((i / 12) * 2 * math.pi)
        noise = 1 + (rng.random() - 0.5) * volatility
        current = current * factor * seasonal * noise
        data.append(ObservedPoint(period=MONTH_NAMES[i % len(MONTH_NAMES)], value=float(round(current))))
    return data


def demo_series(name: str, rng: Optional[RandomSource] = None) -> List[ObservedPoint]:
    base_value, trend, volatility = DEMO_METRICS[name]
    history = generate_historical(base_value, trend, volatility, rng=rng)
    if name == "conversion_rate":
        low, high = settings.conversion_rate_bounds
        history = [ObservedPoint(p.period, max(low, min(high, p.value))) for p in history]
    log.debug("generated %d synthetic points for %s", len(history), name)
    return history
