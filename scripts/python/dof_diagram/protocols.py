"""
DOF Diagram v1.0 — Protocol Dataclasses

Typed data contracts for the depth-of-field calculator and the
top-down frustum diagram.

All dataclasses are frozen (immutable after creation) so every result
is a plain value owned by its caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


UNIT_SYSTEMS = ("Metric", "Imperial")

# Conventional "acceptable sharpness" criterion: 1/1500 of the diagonal
COC_DIAGONAL_DIVISOR = 1500.0

MM_PER_INCH = 25.4


# ════════════════════════════════════════════════════════════
# CAMERA INPUT TYPES
# ════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SensorFormat:
    """Physical sensor (or film gate) format, keyed by display name."""
    name: str
    width_mm: float
    height_mm: float

    def __post_init__(self):
        if not self.name:
            raise ValueError("Sensor format name must not be empty")
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise ValueError(
                f"Invalid sensor dimensions: {self.width_mm}x{self.height_mm}mm"
            )

    @property
    def diagonal_mm(self) -> float:
        return math.sqrt(self.width_mm ** 2 + self.height_mm ** 2)

    @property
    def circle_of_confusion_mm(self) -> float:
        return self.diagonal_mm / COC_DIAGONAL_DIVISOR


@dataclass(frozen=True)
class CameraConfiguration:
    """
    Lens + sensor + focus state for a single calculation.

    subject_distance_in is in inches (the diagram's length unit).
    multiplier models a teleconverter (>1) or speedbooster (<1) and
    scales both focal length and f-number.
    """
    focal_length_mm: float
    aperture: float
    sensor: SensorFormat
    subject_distance_in: float
    multiplier: float = 1.0
    unit_system: str = "Metric"

    def __post_init__(self):
        if self.focal_length_mm <= 0:
            raise ValueError(f"Invalid focal length: {self.focal_length_mm}mm")
        if self.aperture <= 0:
            raise ValueError(f"Invalid aperture: f/{self.aperture}")
        if self.multiplier <= 0:
            raise ValueError(f"Invalid multiplier: {self.multiplier}x")
        if self.subject_distance_in <= 0:
            raise ValueError(
                f"Invalid subject distance: {self.subject_distance_in}in"
            )
        if self.unit_system not in UNIT_SYSTEMS:
            raise ValueError(
                f"Unknown unit system '{self.unit_system}'. "
                f"Available: {list(UNIT_SYSTEMS)}"
            )

    @property
    def effective_focal_length_mm(self) -> float:
        return self.focal_length_mm * self.multiplier

    @property
    def effective_aperture(self) -> float:
        return self.aperture * self.multiplier

    @property
    def subject_distance_mm(self) -> float:
        return self.subject_distance_in * MM_PER_INCH


# ════════════════════════════════════════════════════════════
# RESULT TYPES
# ════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class DepthOfFieldResult:
    """
    Computed focus limits and field of view for a configuration.

    Distances are in inches and clamped to the viewport. When the far
    limit is infinite or falls below the near limit (focus past
    hyperfocal) it is snapped to the viewport edge and far_saturated is
    set. A finite far limit beyond the edge is clamped without the flag.
    """
    circle_of_confusion_mm: float
    hyperfocal_distance: float
    near_limit: float
    far_limit: float
    vertical_fov_deg: float
    horizontal_fov_deg: float = 0.0
    far_saturated: bool = False

    @property
    def depth_of_field(self) -> float:
        """Span of acceptable focus, in inches."""
        return self.far_limit - self.near_limit


@dataclass(frozen=True)
class ViewportBounds:
    """Rectangular diagram region; origin is the camera (frustum apex)."""
    origin_x: float
    origin_y: float
    far_boundary_x: float
    height: float

    def __post_init__(self):
        if self.far_boundary_x <= 0:
            raise ValueError(f"Invalid far boundary: {self.far_boundary_x}")
        if self.height <= 0:
            raise ValueError(f"Invalid viewport height: {self.height}")


DEFAULT_VIEWPORT = ViewportBounds(
    origin_x=0.0,
    origin_y=25.0,
    far_boundary_x=400.0,
    height=50.0,
)


def format_coordinate(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class FrustumPath:
    """
    Closed polygon in screen coordinates (y grows downward).

    points holds each vertex once; the closing edge back to points[0]
    is implicit.
    """
    points: tuple[tuple[float, float], ...]

    def __post_init__(self):
        if len(self.points) < 3:
            raise ValueError(
                f"Frustum path needs at least 3 points, got {len(self.points)}"
            )

    @property
    def closed(self) -> bool:
        return True

    @property
    def ring(self) -> tuple[tuple[float, float], ...]:
        """Vertices with the first point repeated at the end."""
        return self.points + (self.points[0],)

    def to_svg(self) -> str:
        """SVG path data: M x,y L x,y ... Z"""
        head, *tail = self.points
        parts = [f"M{format_coordinate(head[0])},{format_coordinate(head[1])}"]
        parts.extend(f"L{format_coordinate(x)},{format_coordinate(y)}" for x, y in tail)
        parts.append("Z")
        return " ".join(parts)


@dataclass(frozen=True)
class DiagramScene:
    """Everything a renderer needs for one top-down diagram."""
    configuration: CameraConfiguration
    result: DepthOfFieldResult
    viewport: ViewportBounds
    frustum: FrustumPath
