"""
Seasonal decomposition of monthly series into a moving-average trend and a repeating yearly index, with a significance check on the index magnitude.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.seasonal.decompose import Decomposition, SeasonalProfile, decompose, is_significant, seasonal_index

__all__ = ["Decomposition", "SeasonalProfile", "decompose", "is_significant", "seasonal_index"]
