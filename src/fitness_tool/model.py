"""Modelos tipados para sesiones de entrenamiento y sus resúmenes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol

from fitness_tool.constants import (
    RUNNING,
    SWIMMING,
    UNITS,
    WALKING,
    RunningCoefficients,
    SwimmingCoefficients,
    UnitConstants,
    WalkingCoefficients,
)


@dataclass(frozen=True)
class Session:
    """Common measurements of one exercise session.

    Intended invariants (not enforced): ``repetitions >= 0``,
    ``weight_kg > 0`` and ``step_length_m > 0``.
    """

    type_label: str
    repetitions: int
    step_length_m: float
    duration: timedelta
    weight_kg: float

    @property
    def duration_hours(self) -> float:
        """Duration expressed in (fractional) hours."""
        return self.duration.total_seconds() / 3600


@dataclass(frozen=True)
class SessionSummary:
    """Read-only result of one session (distance, speed, calories)."""

    type_label: str
    duration: timedelta
    distance_km: float
    mean_speed_kmh: float
    calories_kcal: float


class CaloriesCalculator(Protocol):
    """Anything that can report calories and a summary."""

    def calories_kcal(self) -> float: ...

    def summarize(self) -> SessionSummary: ...


def distance_km(session: Session, units: UnitConstants = UNITS) -> float:
    """Distance covered: repetitions times repetition length, in km."""
    return session.repetitions * session.step_length_m / units.m_in_km


def mean_speed_kmh(distance: float, duration_hours: float) -> float:
    """Average speed over the whole session; 0 for a zero duration."""
    if duration_hours == 0:
        return 0.0
    return distance / duration_hours


def running_calories(
    speed_kmh: float,
    weight_kg: float,
    duration_hours: float,
    coef: RunningCoefficients = RUNNING,
    units: UnitConstants = UNITS,
) -> float:
    """Kilocalories burned while running."""
    return (
        (coef.speed_multiplier * speed_kmh + coef.speed_shift)
        * weight_kg
        / units.m_in_km
        * duration_hours
        * units.min_in_hour
    )


def walking_calories(
    speed_kmh: float,
    weight_kg: float,
    height_cm: float,
    duration_hours: float,
    coef: WalkingCoefficients = WALKING,
    units: UnitConstants = UNITS,
) -> float:
    """Kilocalories burned while walking.

    The speed in m/s is derived from ``speed_kmh`` (the session mean speed),
    so both the summary and this formula share one speed source.
    """
    height_m = height_cm / units.cm_in_m
    speed_msec = speed_kmh * units.kmh_in_msec
    return (
        (
            coef.weight_multiplier * weight_kg
            + (speed_msec**2 / height_m) * coef.speed_height_multiplier * weight_kg
        )
        * duration_hours
        * units.min_in_hour
    )


def swimming_calories(
    speed_kmh: float,
    weight_kg: float,
    duration_hours: float,
    coef: SwimmingCoefficients = SWIMMING,
) -> float:
    """Kilocalories burned while swimming; 0 for a zero duration."""
    if duration_hours == 0:
        return 0.0
    return (
        (speed_kmh + coef.speed_shift)
        * coef.weight_multiplier
        * weight_kg
        * duration_hours
    )


def _summary(session: Session, speed: float, calories: float) -> SessionSummary:
    return SessionSummary(
        type_label=session.type_label,
        duration=session.duration,
        distance_km=distance_km(session),
        mean_speed_kmh=speed,
        calories_kcal=calories,
    )


@dataclass(frozen=True)
class Running:
    """Running session."""

    session: Session

    def mean_speed_kmh(self, units: UnitConstants = UNITS) -> float:
        distance = distance_km(self.session, units)
        return mean_speed_kmh(distance, self.session.duration_hours)

    def calories_kcal(self) -> float:
        return running_calories(
            self.mean_speed_kmh(),
            self.session.weight_kg,
            self.session.duration_hours,
        )

    def summarize(self) -> SessionSummary:
        return _summary(self.session, self.mean_speed_kmh(), self.calories_kcal())


@dataclass(frozen=True)
class Walking:
    """Walking session; calories depend on the walker's height."""

    session: Session
    height_cm: float

    def mean_speed_kmh(self, units: UnitConstants = UNITS) -> float:
        distance = distance_km(self.session, units)
        return mean_speed_kmh(distance, self.session.duration_hours)

    def calories_kcal(self) -> float:
        return walking_calories(
            self.mean_speed_kmh(),
            self.session.weight_kg,
            self.height_cm,
            self.session.duration_hours,
        )

    def summarize(self) -> SessionSummary:
        return _summary(self.session, self.mean_speed_kmh(), self.calories_kcal())


@dataclass(frozen=True)
class Swimming:
    """Swimming session.

    Speed comes from the pool geometry (length times laps) while the
    reported distance still comes from strokes times stroke length.
    """

    session: Session
    pool_length_m: int
    lap_count: int

    def mean_speed_kmh(self, units: UnitConstants = UNITS) -> float:
        pool_km = self.pool_length_m * self.lap_count / units.m_in_km
        return mean_speed_kmh(pool_km, self.session.duration_hours)

    def calories_kcal(self) -> float:
        return swimming_calories(
            self.mean_speed_kmh(),
            self.session.weight_kg,
            self.session.duration_hours,
        )

    def summarize(self) -> SessionSummary:
        return _summary(self.session, self.mean_speed_kmh(), self.calories_kcal())


Training = Running | Walking | Swimming
