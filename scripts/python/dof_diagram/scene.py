"""
DOF Diagram v1.0 — Scene Orchestrator

Wires the two leaf components together:
  - optics engine: configuration -> DepthOfFieldResult
  - frustum geometry: vertical FOV + viewport -> FrustumPath

The frustum only sees the scalar field of view, never the optics
internals.
"""

from __future__ import annotations

from typing import Any

from .frustum import frustum_for_viewport
from .optics_engine import compute_depth_of_field
from .protocols import CameraConfiguration, DiagramScene, ViewportBounds, DEFAULT_VIEWPORT


def build_scene(
    config: CameraConfiguration,
    viewport: ViewportBounds = DEFAULT_VIEWPORT,
) -> DiagramScene:
    """Compute the numeric result and the frustum path for one configuration."""
    result = compute_depth_of_field(config, viewport.far_boundary_x)
    frustum = frustum_for_viewport(result.vertical_fov_deg, viewport)
    return DiagramScene(
        configuration=config,
        result=result,
        viewport=viewport,
        frustum=frustum,
    )


def scene_to_dict(scene: DiagramScene) -> dict[str, Any]:
    """Flat, JSON-ready summary of a scene."""
    config = scene.configuration
    result = scene.result
    return {
        "sensor":                   config.sensor.name,
        "focalLengthMm":            config.focal_length_mm,
        "aperture":                 config.aperture,
        "multiplier":               config.multiplier,
        "effectiveFocalLengthMm":   config.effective_focal_length_mm,
        "effectiveAperture":        config.effective_aperture,
        "subjectDistanceIn":        config.subject_distance_in,
        "unitSystem":               config.unit_system,
        "circleOfConfusionMm":      result.circle_of_confusion_mm,
        "hyperfocalDistanceIn":     result.hyperfocal_distance,
        "nearLimitIn":              result.near_limit,
        "farLimitIn":               result.far_limit,
        "farSaturated":             result.far_saturated,
        "depthOfFieldIn":           result.depth_of_field,
        "verticalFovDeg":           result.vertical_fov_deg,
        "horizontalFovDeg":         result.horizontal_fov_deg,
        "frustumPath":              scene.frustum.to_svg(),
    }
