"""Data models for run history, athlete profile and assessments."""

from .records import (
    AGE_GROUPS,
    AthleteProfile,
    ExperienceTier,
    RunHistory,
    RunRecord,
)
from .assessment import LoadAssessment, RecoverySnapshot, RiskLevel

__all__ = [
    "AGE_GROUPS",
    "AthleteProfile",
    "ExperienceTier",
    "RunHistory",
    "RunRecord",
    "LoadAssessment",
    "RecoverySnapshot",
    "RiskLevel",
]
