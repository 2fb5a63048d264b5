from __future__ import annotations

from datetime import timedelta

from fitness_tool.model import SessionSummary
from fitness_tool.report import format_summary, read_data


def _summary(**overrides: object) -> SessionSummary:
    values: dict[str, object] = {
        "type_label": "Running",
        "duration": timedelta(minutes=30),
        "distance_km": 3.25,
        "mean_speed_kmh": 6.5,
        "calories_kcal": 302.9145,
    }
    values.update(overrides)
    return SessionSummary(**values)  # type: ignore[arg-type]


def test_format_summary_layout() -> None:
    assert format_summary(_summary()) == (
        "Training type: Running\n"
        "Duration: 30 min\n"
        "Distance: 3.25 km\n"
        "Avg. speed: 6.50 km/h\n"
        "Calories burned: 302.91\n"
    )


def test_format_summary_rounds_to_whole_minutes() -> None:
    text = format_summary(_summary(duration=timedelta(minutes=90, seconds=12)))
    assert "Duration: 90 min\n" in text
    text = format_summary(_summary(duration=timedelta(minutes=90, seconds=40)))
    assert "Duration: 91 min\n" in text


def test_format_summary_two_decimals() -> None:
    text = format_summary(
        _summary(distance_km=2.0, mean_speed_kmh=1 / 6, calories_kcal=323.0)
    )
    lines = text.splitlines()
    assert lines[2] == "Distance: 2.00 km"
    assert lines[3] == "Avg. speed: 0.17 km/h"
    assert lines[4] == "Calories burned: 323.00"


def test_read_data_uses_capability_only() -> None:
    """Cualquier objeto con summarize()/calories_kcal() sirve."""

    class _Fake:
        def calories_kcal(self) -> float:
            return 1.0

        def summarize(self) -> SessionSummary:
            return _summary(type_label="Fake")

    assert read_data(_Fake()).startswith("Training type: Fake\n")
