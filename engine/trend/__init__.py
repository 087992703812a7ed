"""
Trend fitting and smoothing primitives: least-squares polynomial fits with R-squared scoring, and centered moving averages.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.fit import FitResult, LinearFit, evaluate, fit, fit_linear, r_squared
from engine.trend.smoothing import moving_average

__all__ = ["FitResult", "LinearFit", "evaluate", "fit", "fit_linear", "r_squared", "moving_average"]
