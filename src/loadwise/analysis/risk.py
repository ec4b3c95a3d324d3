"""
Injury risk scoring and overtraining warning index.

The injury risk score sums five independent sub-risks worth 20 points each,
so it always lands on 0, 20, 40, 60, 80 or 100:

- ratio: acute:chronic ratio above the athlete's threshold
- resting_hr: resting HR trend (window mean vs latest reading)
- hrv: HRV trend (latest reading vs window mean)
- hrr: mean heart rate recovery below 12 bpm
- monotony: acute load / TSS standard deviation above 2.0

The overtraining warning index is a separate continuous measure; both are
reported and neither overrides the other.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..metrics.variability import (
    VariabilityWindow,
    detect_hrv_trend,
    detect_low_hrr,
    detect_rhr_trend,
)


SUB_RISK_POINTS = 20
MONOTONY_LIMIT = 2.0

RHR_ALERT = "Resting heart rate is trending away from your recent baseline. Consider an extra recovery day."
HRV_ALERT = "Heart rate variability has shifted sharply from your 7-session average. Monitor your recovery."
HRR_ALERT = "Heart rate recovery is below 12 bpm. Your cardiovascular system may be fatigued."
MONOTONY_ALERT = "Training monotony is high. Vary session intensity to reduce burnout risk."


@dataclass(frozen=True)
class RiskResult:
    """Outcome of risk scoring for one assessment."""

    injury_risk_score: int
    overtraining_warning_index: Optional[float]
    alerts: Tuple[str, ...]
    risk_factors: Tuple[str, ...]
    monotony: Optional[float]
    ratio_exceeds_threshold: bool

    def to_dict(self) -> dict:
        return {
            "injury_risk_score": self.injury_risk_score,
            "overtraining_warning_index": self.overtraining_warning_index,
            "alerts": list(self.alerts),
            "risk_factors": list(self.risk_factors),
            "monotony": self.monotony,
            "ratio_exceeds_threshold": self.ratio_exceeds_threshold,
        }


def calculate_overtraining_warning_index(
    ratio: Optional[float],
    mean_resting_hr: float,
    mean_hrv_ms: float,
) -> Optional[float]:
    """
    Continuous overtraining composite.

    index = ratio / 2 + (mean RHR - 50) / 10 - mean HRV / 100

    Returns None when the ratio is undefined.
    """
    if ratio is None:
        return None
    return (ratio / 2) + ((mean_resting_hr - 50) / 10) - (mean_hrv_ms / 100)


def calculate_monotony(acute_load: Optional[float], std_dev_tss: float) -> Optional[float]:
    """Acute load over TSS dispersion; std_dev_tss is already floored."""
    if acute_load is None:
        return None
    return acute_load / std_dev_tss


class RiskScorer:
    """Combines load ratio, biomarker trends and monotony into a risk score."""

    def score(
        self,
        ratio: Optional[float],
        threshold: float,
        window: VariabilityWindow,
        acute_load: Optional[float],
    ) -> RiskResult:
        """
        Score injury risk and build the alert list.

        Args:
            ratio: Acute:chronic ratio, None when undefined
            threshold: Personal overtraining threshold
            window: Variability statistics for the evaluation window
            acute_load: Acute load, None for an empty history

        Returns:
            RiskResult with alerts in evaluation order (resting HR, HRV,
            HRR, monotony). The ratio sub-risk adds points but no alert.
        """
        risk_factors: List[str] = []
        alerts: List[str] = []

        ratio_exceeds = ratio is not None and ratio > threshold
        if ratio_exceeds:
            risk_factors.append("ratio")

        if detect_rhr_trend(window):
            risk_factors.append("resting_hr")
            alerts.append(RHR_ALERT)

        if detect_hrv_trend(window):
            risk_factors.append("hrv")
            alerts.append(HRV_ALERT)

        if detect_low_hrr(window):
            risk_factors.append("hrr")
            alerts.append(HRR_ALERT)

        monotony = calculate_monotony(acute_load, window.std_dev_tss)
        if monotony is not None and monotony > MONOTONY_LIMIT:
            risk_factors.append("monotony")
            alerts.append(MONOTONY_ALERT)

        return RiskResult(
            injury_risk_score=SUB_RISK_POINTS * len(risk_factors),
            overtraining_warning_index=calculate_overtraining_warning_index(
                ratio, window.mean_resting_hr, window.mean_hrv_ms
            ),
            alerts=tuple(alerts),
            risk_factors=tuple(risk_factors),
            monotony=monotony,
            ratio_exceeds_threshold=ratio_exceeds,
        )
