"""Personalized overtraining thresholds."""

from typing import Dict

from ..models.records import AthleteProfile, ExperienceTier


BASE_THRESHOLDS: Dict[str, float] = {
    ExperienceTier.BEGINNER.value: 1.2,
    ExperienceTier.INTERMEDIATE.value: 1.3,
    ExperienceTier.EXPERT.value: 1.5,
}
DEFAULT_THRESHOLD = 1.5

SENIOR_AGE_GROUPS = frozenset({"50-59", "60+"})
SENIOR_ADJUSTMENT = 0.2


def resolve_overtraining_threshold(experience_tier: str, age_group: str) -> float:
    """
    Acute:chronic ratio above which training counts as overtraining.

    Unrecognized tiers use the expert threshold; athletes aged 50 and over
    get a lower threshold.

    Args:
        experience_tier: 'Beginner', 'Intermediate' or 'Expert'
        age_group: One of the onboarding age groups, e.g. '30-39'

    Returns:
        Threshold ratio
    """
    tier = getattr(experience_tier, "value", experience_tier)
    threshold = BASE_THRESHOLDS.get(tier, DEFAULT_THRESHOLD)

    if age_group in SENIOR_AGE_GROUPS:
        threshold -= SENIOR_ADJUSTMENT

    # 1.3 - 0.2 should compare equal to 1.1
    return round(threshold, 2)


class ThresholdResolver:
    """Maps an athlete profile to a personal overtraining threshold."""

    def resolve(self, profile: AthleteProfile) -> float:
        return resolve_overtraining_threshold(profile.experience_tier, profile.age_group)
