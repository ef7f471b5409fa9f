"""
DOF Diagram v1.0 — Python Package

Depth-of-field calculator and top-down frustum diagram builder.
Thin-lens optics, a sensor catalog, ray/viewport clipping for the
visible wedge, and a static SVG rendering of the result.
"""

__version__ = "1.0.0"

from .protocols import (
    CameraConfiguration,
    DepthOfFieldResult,
    DiagramScene,
    FrustumPath,
    SensorFormat,
    ViewportBounds,
    DEFAULT_VIEWPORT,
)
from .registry import get_sensor, list_sensors, register_sensor
from . import sensors  # noqa: F401  registers the built-in catalog
from .optics_engine import compute_depth_of_field
from .frustum import build_frustum_path, frustum_for_viewport
from .scene import build_scene

__all__ = [
    "CameraConfiguration",
    "DEFAULT_VIEWPORT",
    "DepthOfFieldResult",
    "DiagramScene",
    "FrustumPath",
    "SensorFormat",
    "ViewportBounds",
    "build_frustum_path",
    "build_scene",
    "compute_depth_of_field",
    "frustum_for_viewport",
    "get_sensor",
    "list_sensors",
    "register_sensor",
]
