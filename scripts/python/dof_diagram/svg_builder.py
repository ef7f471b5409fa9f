"""
DOF Diagram v1.0 — SVG Diagram Builder

Renders a DiagramScene as a standalone top-down SVG:

    camera icon | frustum wedge (grey) | focus band (red) | subject line
                  near/far ticks with the depth-of-field span underneath

Diagram x is distance in inches from the camera, so the focus band and
subject line sit directly at their computed distances.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

from .protocols import DiagramScene, format_coordinate as _num
from .units import format_distance

logger = logging.getLogger(__name__)

# Left margin holding the camera icon and lens title
_LEFT_MARGIN = 43.5
_FOOTER_HEIGHT = 12.0

# Near/far labels are drawn inside the band only when it is this wide
_MIN_LABELLED_SPAN_IN = 18.0

_CAMERA_ICON_PATH = "M 35 25 H 43.5 V 16 H 35 Z"


def _text(value: str) -> str:
    return html.escape(value, quote=False)


def lens_title(scene: DiagramScene) -> str:
    """Effective lens label, e.g. '100mm f/3.6'."""
    config = scene.configuration
    return (
        f"{config.effective_focal_length_mm:.0f}mm "
        f"f/{config.effective_aperture:.1f}"
    )


def build_diagram_svg(scene: DiagramScene) -> str:
    """Return the diagram as an SVG document string."""
    config = scene.configuration
    result = scene.result
    far = scene.viewport.far_boundary_x
    height = scene.viewport.height
    units = config.unit_system

    view_path = scene.frustum.to_svg()
    near_x = result.near_limit
    far_x = result.far_limit
    subject_x = config.subject_distance_in
    span = result.depth_of_field

    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="{_num(-_LEFT_MARGIN)} 0 {_num(far)} {_num(height + _FOOTER_HEIGHT)}">',
        "  <defs>",
        '    <clipPath id="fov">',
        f'      <path d="{view_path}"/>',
        "    </clipPath>",
        '    <clipPath id="subject">',
        f'      <rect x="0" y="0" width="{_num(far + 100)}" height="{_num(height)}"/>',
        "    </clipPath>",
        "  </defs>",
        f'  <path d="{view_path}" fill="#ccc"/>',
        f'  <path transform="translate(-39.9 6) scale(0.92)" d="{_CAMERA_ICON_PATH}" '
        f'stroke="black" stroke-width="0" clip-path="url(#subject)"/>',
    ]

    # Depth-of-field bracket under the diagram
    for x in (near_x, far_x):
        lines.append(
            f'  <line x1="{_num(x)}" y1="{_num(height + 7)}" '
            f'x2="{_num(x)}" y2="{_num(height + 9)}" stroke="#aaa" stroke-width="0.2"/>'
        )
    lines.append(
        f'  <line x1="{_num(near_x)}" y1="{_num(height + 8)}" '
        f'x2="{_num(far_x)}" y2="{_num(height + 8)}" stroke="#aaa" stroke-width="0.2"/>'
    )
    lines.append(
        f'  <text x="{_num(near_x + span / 2)}" y="{_num(height + 10.7)}" '
        f'font-size="3" text-anchor="middle">{_text(format_distance(span, units))}</text>'
    )

    lines.append(
        f'  <text x="-1" y="5" font-size="4" font-weight="bold" '
        f'text-anchor="end">{_text(lens_title(scene))}</text>'
    )

    if span > _MIN_LABELLED_SPAN_IN:
        lines.append(
            f'  <text font-size="3" text-anchor="start" '
            f'transform="translate({_num(near_x - 0.5)} {_num(height - 1)}) rotate(-90)">'
            f'{_text(format_distance(near_x, units))}</text>'
        )
        lines.append(
            f'  <text font-size="3" text-anchor="start" '
            f'transform="translate({_num(far_x + 0.5)} 1) rotate(90)">'
            f'{_text(format_distance(far_x, units))}</text>'
        )

    lines.extend([
        f'  <text x="{_num(subject_x)}" y="{_num(height + 3.5)}" '
        f'font-size="3" text-anchor="middle">{_text(format_distance(subject_x, units))}</text>',
        f'  <line x1="{_num(subject_x)}" y1="0" x2="{_num(subject_x)}" '
        f'y2="{_num(height)}" stroke="#aaa" stroke-width="0.2"/>',
        f'  <rect x="{_num(near_x)}" y="0" width="{_num(span)}" height="{_num(height)}" '
        f'fill="red" fill-opacity="0.2" clip-path="url(#fov)"/>',
        "</svg>",
    ])
    return "\n".join(lines) + "\n"


def write_diagram_svg(scene: DiagramScene, output_path: Path) -> Path:
    """Write the diagram SVG to output_path, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(build_diagram_svg(scene), encoding="utf-8")
    logger.debug("Wrote diagram to %s", output_path)
    return output_path
