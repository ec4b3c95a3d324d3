"""Training metrics calculations."""

from .load import (
    DEFAULT_LACTATE_THRESHOLD_HR,
    RollingLoad,
    RollingLoadCalculator,
    calculate_intensity_factor,
    calculate_tss,
    calculate_session_load_score,
    parse_pace,
    recommend_for_load_score,
)
from .variability import (
    VariabilityAnalyzer,
    VariabilityWindow,
    calculate_tss_std_dev,
    detect_hrv_trend,
    detect_low_hrr,
    detect_rhr_trend,
)

__all__ = [
    # Load calculations
    "DEFAULT_LACTATE_THRESHOLD_HR",
    "RollingLoad",
    "RollingLoadCalculator",
    "calculate_intensity_factor",
    "calculate_tss",
    # Quick session score
    "calculate_session_load_score",
    "parse_pace",
    "recommend_for_load_score",
    # Variability
    "VariabilityAnalyzer",
    "VariabilityWindow",
    "calculate_tss_std_dev",
    "detect_hrv_trend",
    "detect_low_hrr",
    "detect_rhr_trend",
]
