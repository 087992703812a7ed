"""
Test cases for the linear momentum forecast, including the blend of line and momentum, noise damping by fit quality and the non-negative floor.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from conftest import FixedRandom
from engine.forecast import forecast_linear


def test_forecast_linear_perfect_line(observed, fixed_clock, fixed_random):
    points = forecast_linear(observed([10.0, 20.0, 30.0, 40.0]), 3, clock=fixed_clock, rng=fixed_random)
    assert [p.value for p in points] == pytest.approx([50.0, 60.0, 70.0])
    assert [p.period for p in points] == ["Nov", "Dec", "Jan"]
    assert all(p.is_predicted for p in points)


def test_forecast_linear_variation_is_damped(observed, fixed_clock):
    points = forecast_linear(observed([10.0, 20.0, 30.0, 40.0]), 1, clock=fixed_clock, rng=FixedRandom(1.0))
    # perfect fit: 2% variation scaled by (1 - 0.3) and half the draw range
    assert points[0].value == pytest.approx(50.0 * (1 + 0.02 * 0.7 * 0.5))


def test_forecast_linear_never_negative(observed, fixed_clock, fixed_random):
    points = forecast_linear(observed([30.0, 20.0, 10.0]), 5, clock=fixed_clock, rng=fixed_random)
    assert len(points) == 5
    assert all(p.value >= 0.0 for p in points)
    assert points[-1].value == 0.0


def test_forecast_linear_short_history(observed, fixed_clock, fixed_random):
    assert forecast_linear([], 3, clock=fixed_clock, rng=fixed_random) == []
    points = forecast_linear(observed([7.0]), 2, clock=fixed_clock, rng=fixed_random)
    assert [p.value for p in points] == pytest.approx([7.0, 7.0])
