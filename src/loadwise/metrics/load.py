"""Training load calculations (TSS, rolling acute/chronic load)."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from ..models.records import RunRecord


DEFAULT_LACTATE_THRESHOLD_HR = 165.0
ACUTE_WINDOW = 7
CHRONIC_WINDOW = 42


def calculate_intensity_factor(
    avg_hr: float,
    threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR,
) -> float:
    """
    Intensity Factor (IF) = ratio of session HR to lactate threshold HR.

    Args:
        avg_hr: Average heart rate during the session
        threshold_hr: Lactate threshold heart rate

    Returns:
        Intensity factor (1.0 = at threshold)
    """
    if threshold_hr <= 0:
        raise ValueError(f"Threshold HR must be positive, got {threshold_hr}")
    return avg_hr / threshold_hr


def calculate_tss(
    duration_min: float,
    avg_hr: float,
    threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR,
) -> float:
    """
    Heart-rate based Training Stress Score.

    TSS = (duration / 60) * IF^2 * 100, which gives exactly 100 for one hour
    at threshold. The value is not rounded.

    Args:
        duration_min: Duration of the session in minutes
        avg_hr: Average heart rate during the session
        threshold_hr: Lactate threshold heart rate

    Returns:
        TSS value
    """
    intensity_factor = calculate_intensity_factor(avg_hr, threshold_hr)
    return (duration_min / 60) * (intensity_factor ** 2) * 100


@dataclass(frozen=True)
class RollingLoad:
    """Acute and chronic load with their ratio."""

    acute_load: Optional[float] = None
    chronic_load: Optional[float] = None
    ratio: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "acute_load": self.acute_load,
            "chronic_load": self.chronic_load,
            "ratio": self.ratio,
        }


def _mean_tss(records: Sequence["RunRecord"]) -> float:
    return sum(r.training_stress_score for r in records) / len(records)


class RollingLoadCalculator:
    """
    Rolling mean TSS over the most recent sessions.

    Windows count records, not calendar days: a week with three sessions
    and a week with seven both contribute their most recent N records.
    """

    def __init__(
        self,
        acute_window: int = ACUTE_WINDOW,
        chronic_window: int = CHRONIC_WINDOW,
    ) -> None:
        self.acute_window = acute_window
        self.chronic_window = chronic_window

    def compute(self, history: Sequence["RunRecord"]) -> RollingLoad:
        """
        Compute acute load, chronic load and the acute:chronic ratio.

        Args:
            history: Run records ordered most recent first

        Returns:
            RollingLoad; every field is None for an empty history, and the
            ratio is None whenever chronic load is not positive.
        """
        if not history:
            return RollingLoad()

        acute = _mean_tss(history[:self.acute_window])
        chronic = _mean_tss(history[:self.chronic_window])
        ratio = acute / chronic if chronic > 0 else None

        return RollingLoad(acute_load=acute, chronic_load=chronic, ratio=ratio)


# Quick single-session score from manually entered values

FIVE_K_MILES = 3.1


def parse_pace(pace: str) -> float:
    """Parse a pace string (MM:SS per mile) to decimal minutes per mile."""
    parts = pace.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid pace format: {pace}")
    try:
        minutes, seconds = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Invalid pace format: {pace}") from None
    return minutes + seconds / 60.0


def calculate_session_load_score(
    avg_hr: float,
    pace_min_per_mile: float,
    distance_miles: float,
) -> float:
    """
    Simple load score for a single run.

    Faster paces (under 10 min/mile) raise the pace factor above 1 and
    distance is normalized to a 5K.

    Args:
        avg_hr: Average heart rate in bpm
        pace_min_per_mile: Pace in decimal minutes per mile
        distance_miles: Distance in miles

    Returns:
        Load score (roughly 3-5 for a typical steady run)
    """
    if pace_min_per_mile <= 0:
        raise ValueError(f"Pace must be positive, got {pace_min_per_mile}")
    pace_factor = max(1.0, 10.0 / pace_min_per_mile)
    distance_factor = distance_miles / FIVE_K_MILES
    return (avg_hr * pace_factor * distance_factor) / 100.0


def recommend_for_load_score(score: float) -> str:
    """Training recommendation for a single-session load score."""
    if score < 3:
        return "Train harder!"
    elif score < 5:
        return "Maintain current training."
    else:
        return "Take a rest day!"
