"""Run records, run history and athlete profile."""

import logging
from dataclasses import dataclass, asdict
from datetime import date
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple

from ..metrics.load import DEFAULT_LACTATE_THRESHOLD_HR, calculate_tss

logger = logging.getLogger(__name__)


class ExperienceTier(str, Enum):
    """Running experience levels offered during onboarding."""
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


AGE_GROUPS = ("18-29", "30-39", "40-49", "50-59", "60+")


@dataclass(frozen=True)
class RunRecord:
    """
    Summary metrics for one completed session.

    When training_stress_score is not supplied it is derived from duration
    and average heart rate against DEFAULT_LACTATE_THRESHOLD_HR. Settings
    lactate_threshold_hr is not consulted here; it only applies to records
    built by the history loaders and the synthetic generator.
    """

    date: date
    duration_minutes: float
    distance_km: float
    avg_heart_rate: float
    resting_heart_rate: float
    heart_rate_variability_ms: float
    heart_rate_recovery_bpm: float
    vo2_max: float
    training_stress_score: Optional[float] = None

    # Display only, never consumed by the analytics engine
    avg_power_watts: Optional[float] = None
    steps: Optional[int] = None
    ground_contact_time_ms: Optional[float] = None
    vertical_oscillation_cm: Optional[float] = None
    active_energy_kcal: Optional[float] = None

    def __post_init__(self) -> None:
        if self.training_stress_score is None:
            tss = calculate_tss(
                self.duration_minutes,
                self.avg_heart_rate,
                DEFAULT_LACTATE_THRESHOLD_HR,
            )
            object.__setattr__(self, "training_stress_score", tss)

    @property
    def tss(self) -> float:
        return self.training_stress_score

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data


class RunHistory:
    """
    Run records keyed by calendar day.

    Adding a record for a day that is already present replaces the earlier
    record. Iteration yields records newest first.
    """

    def __init__(self, records: Iterable[RunRecord] = ()) -> None:
        self._by_date: Dict[date, RunRecord] = {}
        for record in records:
            self.add(record)

    def add(self, record: RunRecord) -> None:
        """Add a record, replacing any record already stored for its date."""
        if record.date in self._by_date:
            logger.debug(f"Replacing run record for {record.date.isoformat()}")
        self._by_date[record.date] = record

    def newest_first(self) -> Tuple[RunRecord, ...]:
        return tuple(
            self._by_date[d] for d in sorted(self._by_date, reverse=True)
        )

    def oldest_first(self) -> Tuple[RunRecord, ...]:
        return tuple(self._by_date[d] for d in sorted(self._by_date))

    @property
    def latest(self) -> Optional[RunRecord]:
        if not self._by_date:
            return None
        return self._by_date[max(self._by_date)]

    def __len__(self) -> int:
        return len(self._by_date)

    def __iter__(self) -> Iterator[RunRecord]:
        return iter(self.newest_first())

    def __contains__(self, day: object) -> bool:
        return day in self._by_date

    def __repr__(self) -> str:
        return f"RunHistory(records={len(self)})"


@dataclass(frozen=True)
class AthleteProfile:
    """
    Athlete attributes used to personalize thresholds.

    Values are plain strings as stored by the profile collaborator; unknown
    values fall back to defaults in the threshold resolver.
    """

    experience_tier: str = ExperienceTier.BEGINNER.value
    age_group: str = "18-29"

    def to_dict(self) -> dict:
        return {
            "experience_tier": str(getattr(self.experience_tier, "value", self.experience_tier)),
            "age_group": self.age_group,
        }
