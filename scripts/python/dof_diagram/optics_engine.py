"""
DOF Diagram v1.0 — Optics Engine

Pure-math optical calculations: circle of confusion, FOV, hyperfocal
distance, depth-of-field limits. Thin-lens approximation throughout.
All lengths are millimetres internally; results leave in inches.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .protocols import (
    COC_DIAGONAL_DIVISOR,
    DEFAULT_VIEWPORT,
    CameraConfiguration,
    DepthOfFieldResult,
)
from .units import clamp, mm_to_inches

logger = logging.getLogger(__name__)


def compute_circle_of_confusion(sensor_diagonal_mm: float) -> float:
    """
    Circle of confusion for acceptable sharpness.
    Convention: sensor diagonal / 1500.
    """
    return sensor_diagonal_mm / COC_DIAGONAL_DIVISOR


def compute_fov(focal_length_mm: float, sensor_dimension_mm: float) -> float:
    """Field of view in degrees across one sensor dimension."""
    if focal_length_mm <= 0 or sensor_dimension_mm <= 0:
        return 0.0
    return 2.0 * math.degrees(math.atan(sensor_dimension_mm / 2.0 / focal_length_mm))


def compute_hyperfocal(
    focal_length_mm: float,
    f_number: float,
    coc_mm: float,
) -> float:
    """
    Hyperfocal distance in millimetres.
    H = f + f^2 / (N * c)
    where f = focal length, N = f-number, c = circle of confusion.
    """
    if f_number <= 0 or coc_mm <= 0:
        return float('inf')
    return focal_length_mm + (focal_length_mm ** 2) / (f_number * coc_mm)


def compute_dof_limits(
    focal_length_mm: float,
    f_number: float,
    focus_distance_mm: float,
    coc_mm: float,
    nominal_focal_length_mm: Optional[float] = None,
) -> tuple[float, float]:
    """
    Raw (unclamped) depth of field limits in millimetres.

    focal_length_mm feeds the hyperfocal distance. The focus offset
    (s - f) uses nominal_focal_length_mm, the lens before any
    teleconverter or speedbooster, when given.

    Returns (near_mm, far_mm). Past the hyperfocal distance the far
    denominator goes negative and so does far_mm; an exactly zero
    denominator gives float('inf').
    """
    hyperfocal_mm = compute_hyperfocal(focal_length_mm, f_number, coc_mm)
    if nominal_focal_length_mm is None:
        nominal_focal_length_mm = focal_length_mm
    offset_mm = focus_distance_mm - nominal_focal_length_mm

    near_mm = hyperfocal_mm * focus_distance_mm / (hyperfocal_mm + offset_mm)

    denom_far = hyperfocal_mm - offset_mm
    if denom_far == 0:
        far_mm = float('inf')
    else:
        far_mm = hyperfocal_mm * focus_distance_mm / denom_far

    return (near_mm, far_mm)


def compute_depth_of_field(
    config: CameraConfiguration,
    viewport_far_boundary: float = DEFAULT_VIEWPORT.far_boundary_x,
) -> DepthOfFieldResult:
    """
    Compute focus limits and field of view for a camera configuration.

    This is the main entry point used by the scene builder. Effective
    (multiplied) focal length and aperture feed the hyperfocal distance
    and field of view; the focus offset uses the bare lens. Near and
    far limits are clamped to [0, viewport_far_boundary]; a far limit
    that collapses below the near limit means everything out to
    infinity is sharp and is drawn at the viewport edge.
    """
    focal_mm = config.effective_focal_length_mm
    f_number = config.effective_aperture
    coc_mm = compute_circle_of_confusion(config.sensor.diagonal_mm)

    hyperfocal_mm = compute_hyperfocal(focal_mm, f_number, coc_mm)
    near_mm, far_mm = compute_dof_limits(
        focal_mm,
        f_number,
        config.subject_distance_mm,
        coc_mm,
        nominal_focal_length_mm=config.focal_length_mm,
    )

    near_in = clamp(mm_to_inches(near_mm), 0.0, viewport_far_boundary)
    far_in = clamp(mm_to_inches(far_mm), 0.0, viewport_far_boundary)

    far_saturated = math.isinf(far_mm) or far_in < near_in
    if far_saturated:
        logger.debug(
            "Focus %.1fin at or past hyperfocal %.1fin; far limit saturated",
            config.subject_distance_in, mm_to_inches(hyperfocal_mm),
        )
        far_in = viewport_far_boundary

    result = DepthOfFieldResult(
        circle_of_confusion_mm=coc_mm,
        hyperfocal_distance=mm_to_inches(hyperfocal_mm),
        near_limit=near_in,
        far_limit=far_in,
        vertical_fov_deg=compute_fov(focal_mm, config.sensor.height_mm),
        horizontal_fov_deg=compute_fov(focal_mm, config.sensor.width_mm),
        far_saturated=far_saturated,
    )
    logger.debug(
        "%s %.0fmm f/%.1f @ %.1fin -> near %.2fin far %.2fin vfov %.2fdeg",
        config.sensor.name, focal_mm, f_number, config.subject_distance_in,
        result.near_limit, result.far_limit, result.vertical_fov_deg,
    )
    return result
