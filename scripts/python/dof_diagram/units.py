"""
Unit conversion and distance formatting.

The calculator works in millimetres internally and hands inches back
to the diagram. These helpers cover the boundary in both directions
and the human-readable labels for the Metric and Imperial systems.
"""

from __future__ import annotations

from typing import Optional

from .protocols import MM_PER_INCH, UNIT_SYSTEMS

METERS_PER_INCH = MM_PER_INCH / 1000.0
INCHES_PER_FOOT = 12


def clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def meters_to_inches(meters: float) -> float:
    return meters / METERS_PER_INCH


def to_metric(inches: float, precision: int = 2) -> str:
    """Format a distance in inches as metres, e.g. 72 -> '1.83m'."""
    return f"{inches * METERS_PER_INCH:.{precision}f}m"


def to_imperial(inches: float, precision: int = 0) -> str:
    """
    Format a distance in inches as feet and inches, e.g. 74.7 -> 6' 3".

    Rounding happens on the total so 11.6in never renders as 0' 12".
    """
    total = round(inches, precision)
    feet = int(total // INCHES_PER_FOOT)
    remainder = round(total - feet * INCHES_PER_FOOT, precision)
    if precision <= 0:
        remainder_text = str(int(remainder))
    else:
        remainder_text = f"{remainder:.{precision}f}"
    return f"{feet}' {remainder_text}\""


def format_distance(
    inches: float,
    unit_system: str = "Metric",
    precision: Optional[int] = None,
) -> str:
    """Format a distance for display in the given unit system."""
    if unit_system not in UNIT_SYSTEMS:
        raise ValueError(
            f"Unknown unit system '{unit_system}'. "
            f"Available: {list(UNIT_SYSTEMS)}"
        )
    if unit_system == "Imperial":
        return to_imperial(inches, 0 if precision is None else precision)
    return to_metric(inches, 2 if precision is None else precision)
