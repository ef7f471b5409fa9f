"""
DOF Diagram v1.0 — Frustum Geometry

Traces the wedge visible within a symmetric vertical field of view,
clipped to a rectangular viewport, as a closed polygon.

Screen coordinates: x grows away from the camera, y grows downward.
The top ray leaves the apex at +fov/2 and can exit through y = 0; the
bottom ray leaves at -fov/2 and can exit through y = height. Either
ray may instead reach the far edge x = far_boundary_x first.

Precondition: 0 < vertical_fov_deg < 180. At 180 the ray slope is
singular; real lens/sensor combinations never get close.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .protocols import FrustumPath, ViewportBounds

logger = logging.getLogger(__name__)

# Vertical offset of the apex points so the polygon never pinches to
# zero width at the camera.
APEX_HALF_WIDTH = 1.0


def find_x_at_y(
    apex_x: float,
    apex_y: float,
    angle_deg: float,
    target_y: float,
) -> float:
    """x where the ray from the apex at angle_deg crosses y = target_y."""
    slope = math.tan(math.radians(angle_deg))
    return apex_x + (apex_y - target_y) / slope


def find_y_at_x(
    apex_x: float,
    apex_y: float,
    angle_deg: float,
    target_x: float,
) -> float:
    """y where the ray from the apex at angle_deg crosses x = target_x."""
    slope = math.tan(math.radians(angle_deg))
    return apex_y - slope * (target_x - apex_x)


@dataclass(frozen=True)
class RayExit:
    """Where one edge ray of the frustum leaves the viewport."""
    point: tuple[float, float]
    through_edge: bool  # True: horizontal edge, False: far vertical edge


def trace_ray(
    apex_x: float,
    apex_y: float,
    angle_deg: float,
    edge_y: float,
    far_boundary_x: float,
) -> RayExit:
    """
    Decide whether a ray exits through the horizontal edge y = edge_y
    or through the far edge, and return the exit point.
    """
    intercept_x = find_x_at_y(apex_x, apex_y, angle_deg, edge_y)
    if intercept_x < far_boundary_x:
        return RayExit(point=(intercept_x, edge_y), through_edge=True)
    far_y = find_y_at_x(apex_x, apex_y, angle_deg, far_boundary_x)
    return RayExit(point=(far_boundary_x, far_y), through_edge=False)


def build_frustum_path(
    apex_x: float,
    apex_y: float,
    vertical_fov_deg: float,
    far_boundary_x: float,
    viewport_height: float,
) -> FrustumPath:
    """
    Build the closed frustum polygon.

    Order: apex-top, [top-edge intercept, far-top corner] or far-edge
    exit, far-edge midpoint, [far-bottom corner, bottom-edge intercept]
    or far-edge exit, apex-bottom.
    """
    half_fov = vertical_fov_deg / 2.0

    points: list[tuple[float, float]] = [(apex_x, apex_y - APEX_HALF_WIDTH)]

    top = trace_ray(apex_x, apex_y, half_fov, 0.0, far_boundary_x)
    points.append(top.point)
    if top.through_edge:
        points.append((far_boundary_x, 0.0))

    points.append((far_boundary_x, apex_y))

    bottom = trace_ray(apex_x, apex_y, -half_fov, viewport_height, far_boundary_x)
    if bottom.through_edge:
        points.append((far_boundary_x, viewport_height))
        points.append(bottom.point)
    else:
        points.append(bottom.point)

    points.append((apex_x, apex_y + APEX_HALF_WIDTH))

    logger.debug(
        "Frustum %.2fdeg: top exits %s, bottom exits %s (%d points)",
        vertical_fov_deg,
        "edge" if top.through_edge else "far",
        "edge" if bottom.through_edge else "far",
        len(points),
    )
    return FrustumPath(points=tuple(points))


def frustum_for_viewport(
    vertical_fov_deg: float,
    viewport: ViewportBounds,
) -> FrustumPath:
    """Frustum with its apex at the viewport origin."""
    return build_frustum_path(
        viewport.origin_x,
        viewport.origin_y,
        vertical_fov_deg,
        viewport.far_boundary_x,
        viewport.height,
    )
