"""CLI for the depth-of-field calculator.

Usage:
    dof-diagram
    dof-diagram --focal-length 85 --aperture 1.4 --distance 120
    dof-diagram --sensor "APS-C" --multiplier 1.4 --units Imperial --svg out/dof.svg
    dof-diagram --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from .controls import (
    DEFAULT_APERTURE,
    DEFAULT_FOCAL_LENGTH_MM,
    DEFAULT_MULTIPLIER,
    DEFAULT_SUBJECT_DISTANCE_IN,
    DEFAULT_UNIT_SYSTEM,
    MULTIPLIERS,
    lens_summary,
    validate_ranges,
)
from .protocols import UNIT_SYSTEMS, CameraConfiguration, DiagramScene
from .registry import get_sensor, list_sensors
from .scene import build_scene, scene_to_dict
from .sensors import DEFAULT_SENSOR
from .svg_builder import write_diagram_svg
from .units import format_distance

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dof-diagram",
        description="Compute depth of field and field of view, and draw the top-down diagram",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dof-diagram --focal-length 50 --aperture 1.8 --distance 72
  dof-diagram --multiplier 2 --units Imperial
  dof-diagram --sensor "6x7 (Medium Format)" --svg diagram.svg
        """,
    )
    parser.add_argument(
        "--focal-length", "-f",
        type=float,
        default=DEFAULT_FOCAL_LENGTH_MM,
        help=f"Lens focal length in mm (default: {DEFAULT_FOCAL_LENGTH_MM:g})",
    )
    parser.add_argument(
        "--aperture", "-a",
        type=float,
        default=DEFAULT_APERTURE,
        help=f"Aperture f-number (default: {DEFAULT_APERTURE:g})",
    )
    parser.add_argument(
        "--distance", "-d",
        type=float,
        default=DEFAULT_SUBJECT_DISTANCE_IN,
        help=f"Subject distance in inches (default: {DEFAULT_SUBJECT_DISTANCE_IN:g})",
    )
    parser.add_argument(
        "--sensor", "-s",
        choices=list_sensors(),
        default=DEFAULT_SENSOR,
        help=f"Sensor format (default: '{DEFAULT_SENSOR}')",
    )
    parser.add_argument(
        "--multiplier", "-m",
        type=float,
        default=DEFAULT_MULTIPLIER,
        help=f"Teleconverter/speedbooster factor, one of {list(MULTIPLIERS)}",
    )
    parser.add_argument(
        "--units", "-u",
        choices=UNIT_SYSTEMS,
        default=DEFAULT_UNIT_SYSTEM,
        help=f"Display units (default: {DEFAULT_UNIT_SYSTEM})",
    )
    parser.add_argument(
        "--svg",
        type=str,
        default=None,
        help="Write the diagram to this SVG file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of text",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def format_report(scene: DiagramScene) -> str:
    """Human-readable summary of a scene."""
    config = scene.configuration
    result = scene.result
    units = config.unit_system
    far_text = format_distance(result.far_limit, units)
    if result.far_saturated:
        far_text += " (to infinity)"
    return "\n".join([
        f"{config.sensor.name} | {lens_summary(config)}",
        f"  Subject distance:    {format_distance(config.subject_distance_in, units)}",
        f"  Circle of confusion: {result.circle_of_confusion_mm:.4f}mm",
        f"  Hyperfocal distance: {format_distance(result.hyperfocal_distance, units)}",
        f"  Near limit:          {format_distance(result.near_limit, units)}",
        f"  Far limit:           {far_text}",
        f"  Depth of field:      {format_distance(result.depth_of_field, units)}",
        f"  Vertical FOV:        {result.vertical_fov_deg:.2f} deg",
        f"  Horizontal FOV:      {result.horizontal_fov_deg:.2f} deg",
    ])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = CameraConfiguration(
            focal_length_mm=args.focal_length,
            aperture=args.aperture,
            sensor=get_sensor(args.sensor),
            subject_distance_in=args.distance,
            multiplier=args.multiplier,
            unit_system=args.units,
        )
        validate_ranges(config)
    except (KeyError, ValueError) as e:
        logger.error("Invalid camera configuration: %s", e)
        return 2

    scene = build_scene(config)

    if args.json:
        print(json.dumps(scene_to_dict(scene), indent=2))
    else:
        print(format_report(scene))

    if args.svg:
        output = write_diagram_svg(scene, args.svg)
        logger.info("Diagram saved to %s", output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
