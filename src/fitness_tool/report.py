"""Informe de texto de las sesiones de entrenamiento."""

from __future__ import annotations

from fitness_tool.model import CaloriesCalculator, SessionSummary


def duration_minutes(summary: SessionSummary) -> float:
    """Session duration in (fractional) minutes."""
    return summary.duration.total_seconds() / 60


def format_summary(summary: SessionSummary) -> str:
    """Render the fixed multi-line report of one session.

    Duration is rounded to whole minutes, the other numbers are printed with
    two decimals. Every line ends with a newline.
    """
    return (
        f"Training type: {summary.type_label}\n"
        f"Duration: {duration_minutes(summary):.0f} min\n"
        f"Distance: {summary.distance_km:.2f} km\n"
        f"Avg. speed: {summary.mean_speed_kmh:.2f} km/h\n"
        f"Calories burned: {summary.calories_kcal:.2f}\n"
    )


def read_data(training: CaloriesCalculator) -> str:
    """Return the report of any session that exposes ``summarize()``."""
    return format_summary(training.summarize())
