"""Constantes de conversión y coeficientes de calorías por actividad."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitConstants:
    """Fixed unit conversion factors shared by every activity."""

    m_in_km: float = 1000.0
    min_in_hour: float = 60.0
    cm_in_m: float = 100.0
    step_length_m: float = 0.65
    stroke_length_m: float = 1.38
    kmh_in_msec: float = 0.278


@dataclass(frozen=True)
class RunningCoefficients:
    """Coeficientes de la fórmula de calorías para correr."""

    speed_multiplier: float = 18.0
    speed_shift: float = 1.79


@dataclass(frozen=True)
class WalkingCoefficients:
    """Coeficientes de la fórmula de calorías para caminar."""

    weight_multiplier: float = 0.035
    speed_height_multiplier: float = 0.029


@dataclass(frozen=True)
class SwimmingCoefficients:
    """Coeficientes de la fórmula de calorías para nadar."""

    speed_shift: float = 1.1
    weight_multiplier: float = 2.0


UNITS = UnitConstants()
RUNNING = RunningCoefficients()
WALKING = WalkingCoefficients()
SWIMMING = SwimmingCoefficients()
