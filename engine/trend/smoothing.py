"""
Centered moving-average smoothing used to extract the underlying trend of a series before seasonal effects are estimated.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np


def moving_average(series: Sequence[float], window: int = 3) -> List[float]:
    vals = np.asarray(series, dtype=float)
    n = len(vals)
    window = max(1, int(window))
    back = window // 2
    ahead = math.ceil(window / 2)

    if n == 0:
        return []

    # edges average over whatever part of the window falls inside the series
    idx = np.arange(n)
    start = np.clip(idx - back, 0, n)
    end = np.clip(idx + ahead, 0, n)
    csum = np.concatenate(([0.0], np.cumsum(vals)))
    return ((csum[end] - csum[start]) / (end - start)).tolist()
