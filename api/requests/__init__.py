from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from engine.enums import ForecastMethod
from config import settings


class ObservedPointRequest(BaseModel):
    period: str
    value: float = Field(allow_inf_nan=False)


class ForecastRequest(BaseModel):
    observed: List[ObservedPointRequest] = Field(default_factory=list)
    horizon: int = Field(default=settings.default_horizon, ge=1, le=settings.max_horizon)
    method: ForecastMethod = ForecastMethod.enhanced
    seed: Optional[int] = Field(default=None, ge=0)
