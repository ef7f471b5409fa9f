"""
DOF Diagram v1.0 -- Focus Sweep Example

Writes one diagram per focus distance for a 50mm f/1.8 on full frame,
sweeping 2 feet -> 30 feet, plus the same sweep behind a 1.4x
teleconverter. Useful for eyeballing how the focus band grows with
distance and when it runs off the edge of the viewport.

Run from the repository root:
    python dof_diagram/examples/build_focus_sweep_example.py [output_dir]
"""

from __future__ import annotations

import dataclasses
import os
import sys

_scripts_python = os.path.normpath(
    os.path.join(os.path.dirname(__file__), "..", "..", "scripts", "python")
)
if _scripts_python not in sys.path:
    sys.path.insert(0, _scripts_python)

from dof_diagram.controls import default_configuration
from dof_diagram.scene import build_scene
from dof_diagram.svg_builder import write_diagram_svg
from dof_diagram.units import format_distance

FOCUS_DISTANCES_IN = (24, 48, 72, 120, 180, 240, 360)


def build_focus_sweep_example(save_dir: str = None) -> list[str]:
    """
    Write the sweep diagrams.

    Returns: Absolute paths of the written .svg files.
    """
    if save_dir is None:
        save_dir = os.path.join(os.path.dirname(__file__), "focus_sweep")

    written = []
    base = default_configuration()
    for multiplier in (1.0, 1.4):
        for distance in FOCUS_DISTANCES_IN:
            config = dataclasses.replace(
                base, subject_distance_in=float(distance), multiplier=multiplier
            )
            scene = build_scene(config)
            name = f"focus_{distance:03d}in_x{multiplier:g}.svg"
            path = write_diagram_svg(scene, os.path.join(save_dir, name))
            written.append(str(path.resolve()))

            result = scene.result
            print(
                f"{name}: near {format_distance(result.near_limit)} "
                f"far {format_distance(result.far_limit)}"
                f"{' (saturated)' if result.far_saturated else ''}"
            )
    return written


if __name__ == "__main__":
    paths = build_focus_sweep_example(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Example diagrams saved: {len(paths)}")
