"""
Collection filter tests: only the engine package under this checkout is skipped.
"""

from pathlib import Path

from conftest import ENGINE_DIR, ROOT, pytest_ignore_collect


def test_ignores_engine_package_modules():
    assert pytest_ignore_collect(ENGINE_DIR / "trend" / "fit.py", None) is True


def test_collects_tests_under_an_engine_named_ancestor(tmp_path):
    checkout = tmp_path / "engine" / "monthcast" / "tests" / "test_forecast.py"
    assert not pytest_ignore_collect(checkout, None)
    assert not pytest_ignore_collect(Path(ROOT) / "tests" / "test_forecast.py", None)
