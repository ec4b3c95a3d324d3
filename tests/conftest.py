"""Pytest configuration and fixtures."""

import pytest
from datetime import date, timedelta

from loadwise.config import Settings
from loadwise.models.records import RunRecord
from loadwise.services.engine import AnalyticsEngine


BASE_DATE = date(2025, 3, 31)


def build_record(days_ago: int = 0, **overrides) -> RunRecord:
    """Build a run record with neutral defaults (no biomarker alerts)."""
    fields = {
        "date": BASE_DATE - timedelta(days=days_ago),
        "duration_minutes": 60.0,
        "distance_km": 10.0,
        "avg_heart_rate": 150.0,
        "resting_heart_rate": 55.0,
        "heart_rate_variability_ms": 60.0,
        "heart_rate_recovery_bpm": 20.0,
        "vo2_max": 50.0,
    }
    fields.update(overrides)
    return RunRecord(**fields)


def build_history(tss_values, **overrides):
    """Records newest first, one per day, with the given TSS values."""
    return [
        build_record(days_ago=i, training_stress_score=tss, **overrides)
        for i, tss in enumerate(tss_values)
    ]


@pytest.fixture
def make_record():
    """Factory fixture for run records."""
    return build_record


@pytest.fixture
def make_history():
    """Factory fixture for newest-first record lists."""
    return build_history


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def engine(settings):
    """Analytics engine with default settings."""
    return AnalyticsEngine(settings)
