"""Sesiones de ejemplo fijas que muestra la CLI."""

from __future__ import annotations

from datetime import timedelta

from fitness_tool.constants import UNITS
from fitness_tool.model import Running, Session, Swimming, Training, Walking


def sample_trainings() -> list[Training]:
    """Return the sample sessions in report order: swim, walk, run."""
    swimming = Swimming(
        session=Session(
            type_label="Swimming",
            repetitions=2000,
            step_length_m=UNITS.stroke_length_m,
            duration=timedelta(minutes=90),
            weight_kg=85,
        ),
        pool_length_m=50,
        lap_count=5,
    )
    walking = Walking(
        session=Session(
            type_label="Walking",
            repetitions=20000,
            step_length_m=UNITS.step_length_m,
            duration=timedelta(hours=3, minutes=45),
            weight_kg=85,
        ),
        height_cm=185,
    )
    running = Running(
        session=Session(
            type_label="Running",
            repetitions=5000,
            step_length_m=UNITS.step_length_m,
            duration=timedelta(minutes=30),
            weight_kg=85,
        ),
    )
    return [swimming, walking, running]
