"""Threshold personalization and risk scoring."""

from .thresholds import ThresholdResolver, resolve_overtraining_threshold
from .risk import (
    HRR_ALERT,
    HRV_ALERT,
    MONOTONY_ALERT,
    RHR_ALERT,
    RiskResult,
    RiskScorer,
    calculate_monotony,
    calculate_overtraining_warning_index,
)

__all__ = [
    "ThresholdResolver",
    "resolve_overtraining_threshold",
    "HRR_ALERT",
    "HRV_ALERT",
    "MONOTONY_ALERT",
    "RHR_ALERT",
    "RiskResult",
    "RiskScorer",
    "calculate_monotony",
    "calculate_overtraining_warning_index",
]
