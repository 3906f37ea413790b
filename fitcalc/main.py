from __future__ import annotations

from datetime import timedelta

import structlog

from fitcalc.core.config import get_settings
from fitcalc.core.constants import STEP_LENGTH_M, SWIMMING_STROKE_LENGTH_M
from fitcalc.core.logging import setup_logging
from fitcalc.schemas.workout import (
    RunningSession,
    SwimmingSession,
    WalkingSession,
    WorkoutRecord,
    WorkoutSession,
)
from fitcalc.services.workout_metrics import read_data

logger = structlog.get_logger(__name__)


def example_sessions() -> list[WorkoutSession]:
    swimming = SwimmingSession(
        record=WorkoutRecord(
            activity_label="Плавание",
            repetition_count=2000,
            step_length_m=SWIMMING_STROKE_LENGTH_M,
            duration=timedelta(minutes=90),
            weight_kg=85,
        ),
        pool_length_m=50,
        pool_crossing_count=40,
    )
    walking = WalkingSession(
        record=WorkoutRecord(
            activity_label="Ходьба",
            repetition_count=20000,
            step_length_m=STEP_LENGTH_M,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )
    running = RunningSession(
        record=WorkoutRecord(
            activity_label="Бег",
            repetition_count=5000,
            step_length_m=STEP_LENGTH_M,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )
    return [swimming, walking, running]


def main() -> None:
    setup_logging(get_settings())
    sessions = example_sessions()
    for session in sessions:
        print(read_data(session))
    logger.debug("workout_report_printed", sessions=len(sessions))


if __name__ == "__main__":
    main()
