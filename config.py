"""
Constants and configuration for Monthcast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, Tuple

from pydantic_settings import BaseSettings


MONTHCAST_HOST: str = os.getenv("MONTHCAST_HOST", "0.0.0.0")
MONTHCAST_PORT: int = int(os.getenv("MONTHCAST_PORT", "4323"))
MONTHCAST_LOG_LEVEL: str = os.getenv("MONTHCAST_LOG_LEVEL", "INFO").upper()

MONTH_NAMES: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# presets served by the demo endpoint: (base value, direction, volatility)
DEMO_METRICS: Dict[str, Tuple[float, str, float]] = {
    "sales_revenue": (850000.0, "up", 0.15),
    "customer_acquisition_cost": (125.0, "down", 0.12),
    "conversion_rate": (3.2, "up", 0.08),
}

# multiplicative month-over-month drift applied by the synthetic provider
SYNTHETIC_TREND_FACTORS: Dict[str, float] = {
    "up": 1.05,
    "down": 0.95,
    "stable": 1.01,
}


class Settings(BaseSettings):
    host: str = MONTHCAST_HOST
    port: int = MONTHCAST_PORT
    log_level: str = MONTHCAST_LOG_LEVEL

    # forecast input requirements
    min_observations: int = 3
    max_trend_degree: int = 3
    default_horizon: int = 3
    max_horizon: int = 120

    # trend fitting; "gaussian" solves the full normal equations, "diagonal"
    # reproduces the historical approximation for systems larger than 2x2
    trend_solver: str = "gaussian"
    singular_epsilon: float = 1e-10

    # seasonal decomposition
    season_length: int = 12
    seasonal_smoothing_window: int = 4
    # absolute magnitude, not normalized to the scale of the series
    seasonality_threshold: float = 0.1

    # trend labelling over the most recent observations
    trend_lookback: int = 3
    trend_up_ratio: float = 1.05
    trend_down_ratio: float = 0.95

    # prediction blending
    confidence_cap: float = 0.95
    accuracy_cap: float = 95.0
    uncertainty_scale: float = 0.15
    growth_adjustment: bool = True
    growth_base: float = 1.2
    growth_amplitude: float = 0.1
    floor_ratio: float = 0.2

    # linear forecast path
    linear_strength_bounds: Tuple[float, float] = (0.1, 0.9)
    linear_noise_damping: float = 0.3
    linear_variation_scale: float = 0.02

    # synthetic history
    synthetic_periods: int = 12
    synthetic_seasonal_amplitude: float = 0.1
    conversion_rate_bounds: Tuple[float, float] = (0.5, 8.0)

    model_config = {
        "env_prefix": "MONTHCAST_",
        "extra": "ignore",
    }


settings = Settings()
