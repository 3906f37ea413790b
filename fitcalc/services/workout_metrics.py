from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import structlog

from fitcalc.core import constants as c
from fitcalc.schemas.workout import (
    RunningSession,
    SwimmingSession,
    WalkingSession,
    WorkoutRecord,
    WorkoutSession,
    WorkoutSummary,
)

logger = structlog.get_logger(__name__)


class UnsupportedActivityError(Exception):
    def __init__(self, activity: str) -> None:
        super().__init__(f"No formulas registered for activity '{activity}'")
        self.activity = activity


@dataclass(frozen=True, slots=True)
class ActivityFormulas:
    distance: Callable[[WorkoutSession], float]
    mean_speed: Callable[[WorkoutSession], float]
    calories: Callable[[WorkoutSession], float]


def _step_distance(record: WorkoutRecord) -> float:
    return record.repetition_count * record.step_length_m / c.M_IN_KM


def _speed(distance_km: float, record: WorkoutRecord) -> float:
    # Zero-duration sessions are valid and report no speed.
    hours = record.duration_hours
    if hours == 0:
        return 0.0
    return distance_km / hours


def _base_distance(session: RunningSession | WalkingSession) -> float:
    return _step_distance(session.record)


def _base_mean_speed(session: RunningSession | WalkingSession) -> float:
    return _speed(_base_distance(session), session.record)


def _running_calories(session: RunningSession) -> float:
    record = session.record
    return (
        (c.RUNNING_CALORIES_MEAN_SPEED_MULTIPLIER * _base_mean_speed(session) + c.RUNNING_CALORIES_MEAN_SPEED_SHIFT)
        * record.weight_kg
        / c.M_IN_KM
        * record.duration_hours
        * c.MIN_IN_H
    )


def _walking_calories(session: WalkingSession) -> float:
    record = session.record
    height_m = session.height_cm / c.CM_IN_M
    if height_m == 0:
        return 0.0
    speed_ms = _base_mean_speed(session) * c.KMH_IN_MSEC
    return (
        (
            c.WALKING_CALORIES_WEIGHT_MULTIPLIER * record.weight_kg
            + (speed_ms**2 / height_m) * c.WALKING_CALORIES_SPEED_HEIGHT_MULTIPLIER * record.weight_kg
        )
        * record.duration_hours
        * c.MIN_IN_H
    )


def _pool_distance(session: SwimmingSession) -> float:
    return session.pool_length_m * session.pool_crossing_count / c.M_IN_KM


def _pool_mean_speed(session: SwimmingSession) -> float:
    return _speed(_pool_distance(session), session.record)


def _swimming_calories(session: SwimmingSession) -> float:
    record = session.record
    return (
        (_pool_mean_speed(session) + c.SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
        * c.SWIMMING_CALORIES_WEIGHT_MULTIPLIER
        * record.weight_kg
        * record.duration_hours
    )


FORMULAS: dict[str, ActivityFormulas] = {
    "running": ActivityFormulas(
        distance=_base_distance,
        mean_speed=_base_mean_speed,
        calories=_running_calories,
    ),
    "walking": ActivityFormulas(
        distance=_base_distance,
        mean_speed=_base_mean_speed,
        calories=_walking_calories,
    ),
    "swimming": ActivityFormulas(
        distance=_pool_distance,
        mean_speed=_pool_mean_speed,
        calories=_swimming_calories,
    ),
}


def formulas_for(session: WorkoutSession) -> ActivityFormulas:
    formulas = FORMULAS.get(session.activity)
    if formulas is None:
        raise UnsupportedActivityError(session.activity)
    return formulas


def compute_distance(session: WorkoutSession) -> float:
    """Distance covered, in kilometers."""
    return formulas_for(session).distance(session)


def compute_mean_speed(session: WorkoutSession) -> float:
    """Mean speed in km/h; 0 for a zero-duration session."""
    return formulas_for(session).mean_speed(session)


def compute_calories(session: WorkoutSession) -> float:
    """Calories burned, in kcal, using the activity's own formula."""
    return formulas_for(session).calories(session)


def build_summary(session: WorkoutSession) -> WorkoutSummary:
    formulas = formulas_for(session)
    summary = WorkoutSummary(
        activity_label=session.record.activity_label,
        duration=session.record.duration,
        distance_km=formulas.distance(session),
        mean_speed_kmh=formulas.mean_speed(session),
        calories_kcal=formulas.calories(session),
    )
    logger.debug(
        "workout_summary_built",
        activity=session.activity,
        distance_km=summary.distance_km,
        mean_speed_kmh=summary.mean_speed_kmh,
        calories_kcal=summary.calories_kcal,
    )
    return summary


def read_data(session: WorkoutSession) -> str:
    return build_summary(session).render()
