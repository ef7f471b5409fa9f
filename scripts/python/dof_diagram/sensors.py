"""
Built-in sensor catalog.

Small formats through 6x9 medium format. Width is the long edge; the
diagram's vertical field of view uses the height.
"""

from __future__ import annotations

from .protocols import SensorFormat
from .registry import register_sensor


DEFAULT_SENSOR = "35mm (full frame)"

SENSOR_CATALOG: tuple[SensorFormat, ...] = (
    SensorFormat("Micro Four Thirds",     width_mm=17.3, height_mm=13.0),
    SensorFormat("APS-C",                 width_mm=24.0, height_mm=16.0),
    SensorFormat("Super 35",              width_mm=30.0, height_mm=21.0),
    SensorFormat("35mm (full frame)",     width_mm=35.0, height_mm=24.0),
    SensorFormat("4.5x6 (Medium Format)", width_mm=60.0, height_mm=45.0),
    SensorFormat("6x6 (Medium Format)",   width_mm=60.0, height_mm=60.0),
    SensorFormat("6x7 (Medium Format)",   width_mm=70.0, height_mm=60.0),
    SensorFormat("6x9 (Medium Format)",   width_mm=90.0, height_mm=60.0),
)


# Auto-register on import
for _sensor in SENSOR_CATALOG:
    register_sensor(_sensor)
