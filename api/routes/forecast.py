"""
Forecast routes for projecting monthly metrics from caller-supplied history or from synthetic demo presets.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, HTTPException, Query

from api.routes.exception import handle_exceptions
from api.requests import ForecastRequest
from api.responses import ForecastResponse, PointResponse
from datasources.synthetic import demo_series
from engine.enums import ForecastMethod
from engine.forecast import ObservedPoint, forecast, forecast_linear
from engine.forecast.models import RandomSource, default_random, system_clock
from config import DEMO_METRICS, settings

log = logging.getLogger(__name__)

router = APIRouter(tags=["Forecast"])


def _coerce_query_value(value: Any, cast: Any) -> Any:
    # Allow direct unit-test invocation without FastAPI Query parsing.
    raw = value.default if hasattr(value, "default") else value
    return cast(raw) if raw is not None else None


def _run(
    observed: List[ObservedPoint],
    horizon: int,
    method: ForecastMethod,
    rng: RandomSource,
) -> ForecastResponse:
    if method == ForecastMethod.linear:
        return ForecastResponse.from_points(forecast_linear(observed, horizon, clock=system_clock, rng=rng))
    return ForecastResponse.from_result(forecast(observed, horizon, clock=system_clock, rng=rng))


@router.post("/forecast", summary="Forecast future monthly values from observed history")
@handle_exceptions
async def forecast_metric(req: ForecastRequest) -> ForecastResponse:
    observed = [ObservedPoint(period=p.period, value=p.value) for p in req.observed]
    log.info("forecast requested: %d observations, horizon=%d, method=%s", len(observed), req.horizon, req.method.value)
    return _run(observed, req.horizon, req.method, default_random(req.seed))


@router.get("/forecast/demo/{metric}", summary="Forecast a synthetic demo metric")
@handle_exceptions
async def forecast_demo(
    metric: str,
    horizon: int = Query(default=settings.default_horizon, ge=1, le=settings.max_horizon),
    method: ForecastMethod = Query(default=ForecastMethod.enhanced),
    seed: Optional[int] = Query(default=None, ge=0),
) -> ForecastResponse:
    horizon = _coerce_query_value(horizon, int)
    method = _coerce_query_value(method, ForecastMethod)
    seed = _coerce_query_value(seed, int)
    if metric not in DEMO_METRICS:
        raise HTTPException(status_code=404, detail=f"unknown demo metric: {metric}")

    # one stream: the forecast noise continues where the synthetic history left off
    rng = default_random(seed)
    history = demo_series(metric, rng=rng)
    response = _run(history, horizon, method, rng)
    response.history = [PointResponse.from_observed(p) for p in history]
    return response
