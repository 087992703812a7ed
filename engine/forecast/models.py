"""
Data structures shared by the forecast paths: observed and predicted points, the overall forecast result, and the clock and random-stream abstractions injected into every forecast so that results are reproducible.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Protocol, Tuple

import numpy as np

from engine.enums import TrendDirection
from config import MONTH_NAMES

Clock = Callable[[], datetime]


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class ObservedPoint:
    period: str
    value: float


@dataclass(frozen=True)
class ForecastPoint:
    period: str
    value: float
    is_predicted: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"period": self.period, "value": self.value, "is_predicted": self.is_predicted}


@dataclass(frozen=True)
class ForecastResult:
    points: Tuple[ForecastPoint, ...]
    confidence: float
    trend: TrendDirection
    seasonal: bool
    accuracy: float

    @classmethod
    def empty(cls) -> ForecastResult:
        return cls(points=(), confidence=0.0, trend=TrendDirection.stable, seasonal=False, accuracy=0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": [p.to_dict() for p in self.points],
            "confidence": self.confidence,
            "trend": self.trend.value,
            "seasonal": self.seasonal,
            "accuracy": self.accuracy,
        }


def system_clock() -> datetime:
    return datetime.now()


def default_random(seed: int | None = None) -> RandomSource:
    return np.random.default_rng(seed)


def period_label(now: datetime, steps: int) -> str:
    return MONTH_NAMES[(now.month - 1 + steps) % len(MONTH_NAMES)]
