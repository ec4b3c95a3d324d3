"""Training load and injury risk analytics for endurance athletes."""

from .models import (
    AthleteProfile,
    ExperienceTier,
    LoadAssessment,
    RecoverySnapshot,
    RiskLevel,
    RunHistory,
    RunRecord,
)
from .metrics import (
    RollingLoadCalculator,
    VariabilityAnalyzer,
    calculate_tss,
)
from .analysis import RiskScorer, ThresholdResolver
from .services import AnalyticsEngine, assess

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Models
    "AthleteProfile",
    "ExperienceTier",
    "LoadAssessment",
    "RecoverySnapshot",
    "RiskLevel",
    "RunHistory",
    "RunRecord",
    # Metrics
    "RollingLoadCalculator",
    "VariabilityAnalyzer",
    "calculate_tss",
    # Analysis
    "RiskScorer",
    "ThresholdResolver",
    # Services
    "AnalyticsEngine",
    "assess",
]
