"""
Input contract for the interactive front end.

Slider ranges, dropdown choices, tick marks and defaults the UI uses to
constrain a CameraConfiguration, plus the small pure helpers the UI
calls (range validation, pointer-to-distance mapping, lens label).
"""

from __future__ import annotations

import math

from .protocols import UNIT_SYSTEMS, CameraConfiguration
from .registry import get_sensor
from .sensors import DEFAULT_SENSOR
from .units import INCHES_PER_FOOT, clamp, meters_to_inches

# ════════════════════════════════════════════════════════════
# RANGES AND CHOICES
# ════════════════════════════════════════════════════════════

FOCAL_LENGTH_RANGE_MM = (3.0, 400.0)
APERTURE_RANGE = (0.95, 22.0)
SUBJECT_DISTANCE_RANGE_IN = (10.0, 400.0)
MULTIPLIERS = (0.71, 1.0, 1.4, 1.7, 2.0)  # speedbooster .. 2x teleconverter

FOCAL_LENGTH_MARKS = (14, 28, 35, 50, 70, 85, 100, 135, 155, 200)
APERTURE_MARKS = (0.95, 1.4, 1.8, 2.8, 4, 5.6, 8, 11, 16, 22)

# Imperial distance ticks every 2 feet
IMPERIAL_MARK_STEP_IN = 24

# Closest distance the pointer can drag the subject to
POINTER_MIN_DISTANCE_IN = 5.0

DEFAULT_FOCAL_LENGTH_MM = 50.0
DEFAULT_APERTURE = 1.8
DEFAULT_SUBJECT_DISTANCE_IN = 72.0
DEFAULT_MULTIPLIER = 1.0
DEFAULT_UNIT_SYSTEM = "Metric"


def default_configuration() -> CameraConfiguration:
    """Configuration the front end starts with: 50mm f/1.8 at 6 feet."""
    return CameraConfiguration(
        focal_length_mm=DEFAULT_FOCAL_LENGTH_MM,
        aperture=DEFAULT_APERTURE,
        sensor=get_sensor(DEFAULT_SENSOR),
        subject_distance_in=DEFAULT_SUBJECT_DISTANCE_IN,
        multiplier=DEFAULT_MULTIPLIER,
        unit_system=DEFAULT_UNIT_SYSTEM,
    )


def _check_range(label: str, value: float, bounds: tuple[float, float], unit: str) -> None:
    low, high = bounds
    if not (low <= value <= high):
        raise ValueError(f"{label} {value}{unit} outside [{low:g}, {high:g}]")


def validate_ranges(config: CameraConfiguration) -> None:
    """Raise ValueError if config falls outside what the UI allows."""
    _check_range("Focal length", config.focal_length_mm, FOCAL_LENGTH_RANGE_MM, "mm")
    _check_range("Aperture", config.aperture, APERTURE_RANGE, "")
    _check_range(
        "Subject distance", config.subject_distance_in, SUBJECT_DISTANCE_RANGE_IN, "in"
    )
    if not any(math.isclose(config.multiplier, m) for m in MULTIPLIERS):
        raise ValueError(
            f"Multiplier {config.multiplier}x not one of {list(MULTIPLIERS)}"
        )


def distance_marks(
    unit_system: str,
    far_distance_in: float,
) -> list[tuple[float, str]]:
    """
    Subject-distance slider ticks as (value_in_inches, label) pairs.

    Imperial: every 2 feet, labelled in feet. Metric: every metre.
    Only ticks within far_distance_in are returned.
    """
    if unit_system not in UNIT_SYSTEMS:
        raise ValueError(
            f"Unknown unit system '{unit_system}'. "
            f"Available: {list(UNIT_SYSTEMS)}"
        )
    if unit_system == "Imperial":
        count = int(far_distance_in // IMPERIAL_MARK_STEP_IN)
        return [
            (float(step * IMPERIAL_MARK_STEP_IN),
             f"{step * IMPERIAL_MARK_STEP_IN // INCHES_PER_FOOT}'")
            for step in range(1, count + 1)
        ]
    marks = []
    meters = 1
    while meters_to_inches(meters) <= far_distance_in:
        marks.append((meters_to_inches(meters), f"{meters}m"))
        meters += 1
    return marks


def distance_from_pointer(x: float, far_distance_in: float) -> float:
    """Map a pointer x coordinate on the diagram to a subject distance."""
    return clamp(x, POINTER_MIN_DISTANCE_IN, far_distance_in)


def lens_summary(config: CameraConfiguration) -> str:
    """'Real: 50mm f/1.8 | Effective: 100mm f/3.6'"""
    return (
        f"Real: {config.focal_length_mm:g}mm f/{config.aperture:g} | "
        f"Effective: {config.effective_focal_length_mm:.0f}mm "
        f"f/{config.effective_aperture:.1f}"
    )
