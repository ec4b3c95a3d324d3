"""Tests for run records, run history and assessment models."""

import dataclasses
import pytest
from datetime import date

from loadwise.models.assessment import LoadAssessment, RecoverySnapshot, RiskLevel
from loadwise.models.records import AthleteProfile, ExperienceTier, RunHistory, RunRecord


class TestRunRecord:
    """Tests for RunRecord."""

    def test_tss_derived_when_missing(self, make_record):
        """Missing TSS is derived from duration and average HR."""
        record = make_record(duration_minutes=60.0, avg_heart_rate=165.0)
        assert record.training_stress_score == 100.0
        assert record.tss == 100.0

    def test_direct_record_ignores_settings_threshold(self, make_record, monkeypatch):
        """Records built directly derive TSS against the default threshold."""
        monkeypatch.setenv("LOADWISE_LACTATE_THRESHOLD_HR", "150")
        record = make_record(duration_minutes=60.0, avg_heart_rate=165.0)
        assert record.training_stress_score == 100.0

    def test_explicit_tss_kept(self, make_record):
        """A supplied TSS is not recomputed."""
        record = make_record(training_stress_score=42.0)
        assert record.training_stress_score == 42.0

    def test_zero_tss_kept(self, make_record):
        """Zero is a valid supplied TSS."""
        assert make_record(training_stress_score=0.0).training_stress_score == 0.0

    def test_immutable(self, make_record):
        """Records cannot be modified."""
        record = make_record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.avg_heart_rate = 170.0

    def test_to_dict(self, make_record):
        """Serialization uses ISO dates and keeps display fields."""
        record = make_record(days_ago=0, steps=9000)
        data = record.to_dict()
        assert data["date"] == "2025-03-31"
        assert data["steps"] == 9000
        assert data["avg_power_watts"] is None


class TestRunHistory:
    """Tests for the run record store."""

    def test_ordering(self, make_record):
        """Records can be read newest or oldest first."""
        old = make_record(days_ago=5)
        mid = make_record(days_ago=2)
        new = make_record(days_ago=0)
        history = RunHistory([mid, new, old])

        assert history.newest_first() == (new, mid, old)
        assert history.oldest_first() == (old, mid, new)
        assert list(history) == [new, mid, old]
        assert history.latest == new

    def test_same_day_replacement(self, make_record):
        """Adding a record for an existing day replaces it."""
        first = make_record(days_ago=1, training_stress_score=30.0)
        second = make_record(days_ago=1, training_stress_score=70.0)
        history = RunHistory([first])
        history.add(second)

        assert len(history) == 1
        assert history.latest.training_stress_score == 70.0

    def test_contains_by_date(self, make_record):
        history = RunHistory([make_record(days_ago=0)])
        assert date(2025, 3, 31) in history
        assert date(2025, 3, 30) not in history

    def test_empty(self):
        history = RunHistory()
        assert len(history) == 0
        assert history.latest is None
        assert history.newest_first() == ()


class TestAthleteProfile:
    """Tests for AthleteProfile."""

    def test_defaults(self):
        profile = AthleteProfile()
        assert profile.experience_tier == "Beginner"
        assert profile.age_group == "18-29"

    def test_to_dict_with_enum(self):
        profile = AthleteProfile(ExperienceTier.EXPERT, "60+")
        assert profile.to_dict() == {"experience_tier": "Expert", "age_group": "60+"}


class TestRiskLevel:
    """Tests for injury score buckets."""

    @pytest.mark.parametrize(
        "score,level",
        [
            (0, RiskLevel.LOW),
            (20, RiskLevel.LOW),
            (40, RiskLevel.MODERATE),
            (60, RiskLevel.HIGH),
            (80, RiskLevel.CRITICAL),
            (100, RiskLevel.CRITICAL),
        ],
    )
    def test_from_score(self, score, level):
        assert RiskLevel.from_score(score) == level


class TestLoadAssessment:
    """Tests for LoadAssessment serialization."""

    def test_empty_to_dict(self):
        data = LoadAssessment.empty().to_dict()
        assert data["acute_load"] is None
        assert data["acute_chronic_ratio"] is None
        assert data["injury_risk_score"] == 0
        assert data["alerts"] == []
        assert data["recovery_snapshot"] is None
        assert data["risk_level"] == "low"

    def test_to_dict_rounds_values(self):
        assessment = LoadAssessment(
            acute_load=81.234,
            chronic_load=70.0,
            acute_chronic_ratio=1.16049,
            overtraining_warning_index=0.4321,
            injury_risk_score=40,
            alerts=("a", "b"),
            recovery_snapshot=RecoverySnapshot(55.04, 61.26, 20.0, 50.0),
            overtraining_threshold=1.2,
            monotony=3.3333,
            risk_factors=("hrr", "monotony"),
            session_count=9,
        )
        data = assessment.to_dict()

        assert data["acute_load"] == 81.2
        assert data["acute_chronic_ratio"] == 1.16
        assert data["overtraining_warning_index"] == 0.43
        assert data["monotony"] == 3.33
        assert data["risk_level"] == "moderate"
        assert data["alerts"] == ["a", "b"]
        assert data["recovery_snapshot"]["mean_hrv_ms"] == 61.3
        assert data["session_count"] == 9
