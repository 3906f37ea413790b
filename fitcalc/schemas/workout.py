from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutRecord(BaseModel):
    """Raw measurements shared by every activity."""

    model_config = ConfigDict(frozen=True)

    activity_label: str
    repetition_count: int = Field(ge=0)
    step_length_m: float = Field(ge=0)
    duration: timedelta
    weight_kg: float = Field(ge=0)

    @field_validator("duration")
    @classmethod
    def _non_negative_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / 3600.0

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60.0


class RunningSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity: Literal["running"] = "running"
    record: WorkoutRecord


class WalkingSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity: Literal["walking"] = "walking"
    record: WorkoutRecord
    height_cm: float = Field(ge=0)


class SwimmingSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity: Literal["swimming"] = "swimming"
    record: WorkoutRecord
    pool_length_m: int = Field(ge=0)
    pool_crossing_count: int = Field(ge=0)


WorkoutSession = Annotated[
    Union[RunningSession, WalkingSession, SwimmingSession],
    Field(discriminator="activity"),
]


class WorkoutSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity_label: str
    duration: timedelta
    distance_km: float
    mean_speed_kmh: float
    calories_kcal: float

    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60.0

    def render(self) -> str:
        return (
            f"Тип тренировки: {self.activity_label}\n"
            f"Длительность: {self.duration_minutes:.1f} минут\n"
            f"Дистанция: {self.distance_km:.2f} км\n"
            f"Ср. скорость: {self.mean_speed_kmh:.2f} км/ч\n"
            f"Потрачено ккал: {self.calories_kcal:.2f}"
        )

    def __str__(self) -> str:
        return self.render()
