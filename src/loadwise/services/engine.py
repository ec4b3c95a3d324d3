"""
Load & risk analytics engine.

Runs the full pipeline for one athlete:
rolling load -> variability window -> personal threshold -> risk scoring,
and assembles a LoadAssessment. Every call recomputes from scratch; the
engine keeps no state between calls and never mutates its inputs.
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from ..analysis.risk import RiskScorer
from ..analysis.thresholds import ThresholdResolver
from ..config import Settings, get_settings
from ..metrics.load import RollingLoadCalculator
from ..metrics.variability import VariabilityAnalyzer
from ..models.assessment import LoadAssessment, RecoverySnapshot
from ..models.records import AthleteProfile, RunHistory, RunRecord

logger = logging.getLogger(__name__)

HistoryInput = Union[RunHistory, Iterable[RunRecord]]


def _newest_first(history: HistoryInput) -> Sequence[RunRecord]:
    if not isinstance(history, RunHistory):
        history = RunHistory(history)
    return history.newest_first()


class AnalyticsEngine:
    """Produces LoadAssessment snapshots from run history and a profile."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        settings = settings or get_settings()
        self.load_calculator = RollingLoadCalculator(
            acute_window=settings.acute_window,
            chronic_window=settings.chronic_window,
        )
        self.variability_analyzer = VariabilityAnalyzer(
            window_size=settings.variability_window,
        )
        self.threshold_resolver = ThresholdResolver()
        self.risk_scorer = RiskScorer()

    def assess(
        self,
        history: HistoryInput,
        profile: Optional[AthleteProfile] = None,
    ) -> LoadAssessment:
        """
        Assess training load and injury risk.

        Args:
            history: RunHistory, or run records in any order (same-day
                duplicates are resolved in favour of the later record)
            profile: Athlete profile, defaults to a beginner aged 18-29

        Returns:
            LoadAssessment. An empty history yields an assessment with every
            optional field absent, a zero score and no alerts.
        """
        profile = profile or AthleteProfile()
        records = _newest_first(history)

        if not records:
            logger.debug("Empty history, returning empty assessment")
            return LoadAssessment.empty()

        load = self.load_calculator.compute(records)
        window = self.variability_analyzer.windowed(records)
        threshold = self.threshold_resolver.resolve(profile)
        logger.debug(
            f"Load acute={load.acute_load:.1f} chronic={load.chronic_load:.1f} "
            f"ratio={load.ratio} threshold={threshold} std_dev_tss={window.std_dev_tss:.2f}"
        )

        risk = self.risk_scorer.score(
            ratio=load.ratio,
            threshold=threshold,
            window=window,
            acute_load=load.acute_load,
        )

        assessment = LoadAssessment(
            acute_load=load.acute_load,
            chronic_load=load.chronic_load,
            acute_chronic_ratio=load.ratio,
            overtraining_warning_index=risk.overtraining_warning_index,
            injury_risk_score=risk.injury_risk_score,
            alerts=risk.alerts,
            recovery_snapshot=RecoverySnapshot(
                mean_resting_hr=window.mean_resting_hr,
                mean_hrv_ms=window.mean_hrv_ms,
                mean_hrr_bpm=window.mean_hrr_bpm,
                mean_vo2_max=window.mean_vo2_max,
            ),
            overtraining_threshold=threshold,
            ratio_exceeds_threshold=risk.ratio_exceeds_threshold,
            monotony=risk.monotony,
            risk_factors=risk.risk_factors,
            session_count=len(records),
        )

        logger.info(
            f"Assessed {len(records)} sessions: injury risk {assessment.injury_risk_score} "
            f"({assessment.risk_level.value}), {len(assessment.alerts)} alerts"
        )
        return assessment


# Singleton instance
_engine: Optional[AnalyticsEngine] = None


def get_engine() -> AnalyticsEngine:
    """Get the analytics engine singleton."""
    global _engine
    if _engine is None:
        _engine = AnalyticsEngine()
    return _engine


def assess(history: HistoryInput, profile: Optional[AthleteProfile] = None) -> LoadAssessment:
    """Assess with the default engine."""
    return get_engine().assess(history, profile)
