"""
Enumerations for Trend Direction, Solver Method, and Forecast Method

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class TrendDirection(str, Enum):
    up = "up"
    down = "down"
    stable = "stable"

    @classmethod
    def from_recent(cls, first: float, last: float) -> TrendDirection:
        # ratios are configurable so that the labelling band can be tuned
        # without modifying this logic.
        from config import settings

        if last > first * settings.trend_up_ratio:
            return cls.up
        if last < first * settings.trend_down_ratio:
            return cls.down
        return cls.stable


class SolverMethod(str, Enum):
    gaussian = "gaussian"
    diagonal = "diagonal"


class ForecastMethod(str, Enum):
    enhanced = "enhanced"
    linear = "linear"
