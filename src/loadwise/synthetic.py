"""
Synthetic run history for demos and tests.

Generates one session per day following a simple weekly pattern (easy runs,
one tempo session, one long run) with small random variation in heart rate
and recovery markers. A fixed seed always produces the same history.
"""

import random
from datetime import date, timedelta
from typing import Optional

from .metrics.load import DEFAULT_LACTATE_THRESHOLD_HR, calculate_tss
from .models.records import RunHistory, RunRecord


# weekday -> (duration_min, avg_hr, pace_min_per_km)
WEEKLY_PATTERN = {
    0: (40, 138, 6.0),   # Monday: easy
    1: (50, 158, 5.0),   # Tuesday: tempo
    2: (35, 135, 6.2),   # Wednesday: recovery
    3: (45, 145, 5.6),   # Thursday: steady
    4: (30, 132, 6.3),   # Friday: shakeout
    5: (95, 148, 5.8),   # Saturday: long run
    6: (40, 136, 6.1),   # Sunday: easy
}


def generate_synthetic_history(
    days: int = 42,
    seed: Optional[int] = None,
    end_date: Optional[date] = None,
    lactate_threshold_hr: float = DEFAULT_LACTATE_THRESHOLD_HR,
) -> RunHistory:
    """
    Generate a plausible daily run history.

    Args:
        days: Number of consecutive days (one session each)
        seed: Random seed for reproducible output
        end_date: Date of the most recent session, defaults to today
        lactate_threshold_hr: Threshold HR used to derive TSS

    Returns:
        RunHistory with `days` records
    """
    rng = random.Random(seed)
    end_date = end_date or date.today()

    # Slowly varying physiology, random walk around the athlete's baseline
    resting_hr = rng.uniform(48, 56)
    hrv = rng.uniform(55, 75)
    vo2_max = rng.uniform(45, 55)

    history = RunHistory()
    for offset in range(days - 1, -1, -1):
        day = end_date - timedelta(days=offset)
        duration, base_hr, pace = WEEKLY_PATTERN[day.weekday()]

        duration = max(10.0, duration * rng.uniform(0.85, 1.15))
        avg_hr = base_hr + rng.uniform(-5, 5)
        pace = pace * rng.uniform(0.95, 1.05)
        distance_km = duration / pace

        resting_hr = min(70.0, max(40.0, resting_hr + rng.uniform(-1.5, 1.5)))
        hrv = min(120.0, max(20.0, hrv + rng.uniform(-6, 6)))
        vo2_max = min(70.0, max(35.0, vo2_max + rng.uniform(-0.3, 0.3)))

        history.add(RunRecord(
            date=day,
            duration_minutes=round(duration, 1),
            distance_km=round(distance_km, 2),
            avg_heart_rate=round(avg_hr, 1),
            resting_heart_rate=round(resting_hr, 1),
            heart_rate_variability_ms=round(hrv, 1),
            heart_rate_recovery_bpm=round(rng.uniform(10, 30), 1),
            vo2_max=round(vo2_max, 1),
            training_stress_score=calculate_tss(
                round(duration, 1), round(avg_hr, 1), lactate_threshold_hr
            ),
            avg_power_watts=round(rng.uniform(200, 280), 0),
            steps=int(duration * rng.uniform(160, 175)),
            ground_contact_time_ms=round(rng.uniform(220, 270), 0),
            vertical_oscillation_cm=round(rng.uniform(7.5, 10.0), 1),
            active_energy_kcal=round(duration * rng.uniform(10, 13), 0),
        ))

    return history
