"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.enums import ForecastMethod, TrendDirection
from engine.forecast.models import ForecastPoint, ForecastResult, ObservedPoint


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class PointResponse(NpModel):

    period: str
    value: float
    is_predicted: bool = False

    @classmethod
    def from_observed(cls, point: ObservedPoint) -> PointResponse:
        return cls(period=point.period, value=point.value, is_predicted=False)

    @classmethod
    def from_forecast(cls, point: ForecastPoint) -> PointResponse:
        return cls(period=point.period, value=point.value, is_predicted=point.is_predicted)


class ForecastResponse(NpModel):

    method: ForecastMethod
    points: List[PointResponse] = Field(default_factory=list)
    # raw goodness of fit, negative for fits worse than the mean
    confidence: Optional[float] = None
    trend: Optional[TrendDirection] = None
    seasonal: Optional[bool] = None
    accuracy: Optional[float] = None
    history: List[PointResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: ForecastResult) -> ForecastResponse:
        return cls(
            method=ForecastMethod.enhanced,
            points=[PointResponse.from_forecast(p) for p in result.points],
            confidence=result.confidence,
            trend=result.trend,
            seasonal=result.seasonal,
            accuracy=result.accuracy,
        )

    @classmethod
    def from_points(cls, points: List[ForecastPoint]) -> ForecastResponse:
        return cls(
            method=ForecastMethod.linear,
            points=[PointResponse.from_forecast(p) for p in points],
        )
