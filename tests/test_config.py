from __future__ import annotations

import logging

import pytest

from fitplan.config import configure_logging, get_settings
from fitplan.services.engine import generate_workout_plan, generate_workout_recommendations
from tests.helpers import build_profile, build_report


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_env_overrides_engine_defaults(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("DEFAULT_AVAILABLE_TIME", "30")
    monkeypatch.setenv("DEFAULT_DURATION_WEEKS", "2")
    monkeypatch.setenv("MAX_TOP_RECOMMENDATIONS", "1")

    profile = build_profile()
    recs = generate_workout_recommendations(profile, [], build_report())
    plan = generate_workout_plan(profile, recs)

    assert all(r.duration <= 30 for r in recs)
    assert sum(r.is_recommended for r in recs) == 1
    assert plan.duration == 2


@pytest.fixture
def package_logger():
    logger = logging.getLogger("fitplan")
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_configure_logging(monkeypatch, fresh_settings, package_logger) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging()
    assert package_logger.level == logging.DEBUG
    configure_logging("warning")
    assert package_logger.level == logging.WARNING
