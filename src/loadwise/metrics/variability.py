"""Recovery biomarker averages, TSS dispersion and trend checks.

Trend checks compare the window mean against the most recent session's raw
value, so they react to the latest sample rather than to a slow drift.
"""

import math
from dataclasses import dataclass
from statistics import mean, pstdev
from typing import TYPE_CHECKING, Optional, Sequence

from ..exceptions import InsufficientDataError

if TYPE_CHECKING:
    from ..models.records import RunRecord


VARIABILITY_WINDOW = 7

# Used in place of the TSS standard deviation when it is undefined or ~0
STD_DEV_FLOOR = 1.0

RHR_TREND_BPM = 5.0
HRV_TREND_MS = 15.0
LOW_HRR_BPM = 12.0


@dataclass(frozen=True)
class VariabilityWindow:
    """Biomarker means and TSS dispersion over the most recent sessions."""

    mean_resting_hr: float
    mean_hrv_ms: float
    mean_hrr_bpm: float
    mean_vo2_max: float
    std_dev_tss: float
    latest_resting_hr: float
    latest_hrv_ms: float
    size: int

    def to_dict(self) -> dict:
        return {
            "mean_resting_hr": self.mean_resting_hr,
            "mean_hrv_ms": self.mean_hrv_ms,
            "mean_hrr_bpm": self.mean_hrr_bpm,
            "mean_vo2_max": self.mean_vo2_max,
            "std_dev_tss": self.std_dev_tss,
            "latest_resting_hr": self.latest_resting_hr,
            "latest_hrv_ms": self.latest_hrv_ms,
            "size": self.size,
        }


def calculate_tss_std_dev(tss_values: Sequence[float]) -> float:
    """
    Population standard deviation of TSS, guarded for use as a denominator.

    Returns STD_DEV_FLOOR when fewer than two values are given or when every
    value is (nearly) identical.
    """
    if len(tss_values) < 2:
        return STD_DEV_FLOOR
    std_dev = pstdev(tss_values)
    if math.isclose(std_dev, 0.0, abs_tol=1e-9):
        return STD_DEV_FLOOR
    return std_dev


class VariabilityAnalyzer:
    """Windowed statistics over the most recent run records."""

    def __init__(self, window_size: int = VARIABILITY_WINDOW) -> None:
        self.window_size = window_size

    def windowed(
        self,
        history: Sequence["RunRecord"],
        window_size: Optional[int] = None,
    ) -> VariabilityWindow:
        """
        Compute biomarker means and TSS dispersion.

        Args:
            history: Run records ordered most recent first (non-empty)
            window_size: Number of most recent records to include, defaults
                to the analyzer's window size

        Returns:
            VariabilityWindow over min(window_size, len(history)) records

        Raises:
            InsufficientDataError: If history is empty
        """
        if not history:
            raise InsufficientDataError("Cannot compute variability over an empty history")

        size = window_size or self.window_size
        window = history[:size]
        latest = window[0]

        return VariabilityWindow(
            mean_resting_hr=mean(r.resting_heart_rate for r in window),
            mean_hrv_ms=mean(r.heart_rate_variability_ms for r in window),
            mean_hrr_bpm=mean(r.heart_rate_recovery_bpm for r in window),
            mean_vo2_max=mean(r.vo2_max for r in window),
            std_dev_tss=calculate_tss_std_dev([r.training_stress_score for r in window]),
            latest_resting_hr=latest.resting_heart_rate,
            latest_hrv_ms=latest.heart_rate_variability_ms,
            size=len(window),
        )


def detect_rhr_trend(window: VariabilityWindow) -> bool:
    """Window mean resting HR at least 5 bpm above the latest reading."""
    return window.mean_resting_hr - window.latest_resting_hr >= RHR_TREND_BPM


def detect_hrv_trend(window: VariabilityWindow) -> bool:
    """Latest HRV at least 15 ms above the window mean."""
    return window.latest_hrv_ms - window.mean_hrv_ms >= HRV_TREND_MS


def detect_low_hrr(window: VariabilityWindow) -> bool:
    """Mean heart rate recovery below 12 bpm."""
    return window.mean_hrr_bpm < LOW_HRR_BPM
