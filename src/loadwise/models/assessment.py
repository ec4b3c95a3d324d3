"""Assessment output produced by the analytics engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RiskLevel(str, Enum):
    """Injury risk bucket derived from the injury risk score."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_score(cls, score: int) -> "RiskLevel":
        """
        Bucket an injury risk score.

        - 0-20: low (at most one sub-risk)
        - 40: moderate
        - 60: high
        - 80-100: critical
        """
        if score <= 20:
            return cls.LOW
        elif score <= 40:
            return cls.MODERATE
        elif score <= 60:
            return cls.HIGH
        else:
            return cls.CRITICAL


@dataclass(frozen=True)
class RecoverySnapshot:
    """Recovery biomarker averages over the evaluation window."""

    mean_resting_hr: float
    mean_hrv_ms: float
    mean_hrr_bpm: float
    mean_vo2_max: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "mean_resting_hr": round(self.mean_resting_hr, 1),
            "mean_hrv_ms": round(self.mean_hrv_ms, 1),
            "mean_hrr_bpm": round(self.mean_hrr_bpm, 1),
            "mean_vo2_max": round(self.mean_vo2_max, 1),
        }


@dataclass(frozen=True)
class LoadAssessment:
    """
    Training load and risk snapshot for one athlete.

    Optional fields are None when the history is too short to define them.
    """

    acute_load: Optional[float] = None
    chronic_load: Optional[float] = None
    acute_chronic_ratio: Optional[float] = None
    overtraining_warning_index: Optional[float] = None
    injury_risk_score: int = 0
    alerts: Tuple[str, ...] = ()
    recovery_snapshot: Optional[RecoverySnapshot] = None

    overtraining_threshold: Optional[float] = None
    ratio_exceeds_threshold: bool = False
    monotony: Optional[float] = None
    risk_factors: Tuple[str, ...] = ()
    session_count: int = 0

    @classmethod
    def empty(cls) -> "LoadAssessment":
        """Assessment for an empty history: nothing known, nothing alerted."""
        return cls()

    @property
    def has_sufficient_data(self) -> bool:
        return self.session_count > 0

    @property
    def risk_level(self) -> RiskLevel:
        return RiskLevel.from_score(self.injury_risk_score)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""

        def _round(value: Optional[float], digits: int = 2) -> Optional[float]:
            return round(value, digits) if value is not None else None

        return {
            "acute_load": _round(self.acute_load, 1),
            "chronic_load": _round(self.chronic_load, 1),
            "acute_chronic_ratio": _round(self.acute_chronic_ratio),
            "overtraining_warning_index": _round(self.overtraining_warning_index),
            "overtraining_threshold": self.overtraining_threshold,
            "ratio_exceeds_threshold": self.ratio_exceeds_threshold,
            "monotony": _round(self.monotony),
            "injury_risk_score": self.injury_risk_score,
            "risk_level": self.risk_level.value,
            "risk_factors": list(self.risk_factors),
            "alerts": list(self.alerts),
            "recovery_snapshot": (
                self.recovery_snapshot.to_dict() if self.recovery_snapshot else None
            ),
            "session_count": self.session_count,
        }
