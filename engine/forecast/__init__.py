"""
Forecasting of monthly metrics, including the blended polynomial-plus-seasonal forecast with confidence and accuracy scoring, and a simpler linear momentum forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.models import ForecastPoint, ForecastResult, ObservedPoint, period_label
from engine.forecast.enhanced import forecast, trend_direction
from engine.forecast.linear import forecast_linear

__all__ = [
    "ForecastPoint",
    "ForecastResult",
    "ObservedPoint",
    "period_label",
    "forecast",
    "trend_direction",
    "forecast_linear",
]
