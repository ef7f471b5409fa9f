"""
DOF Diagram v1.0 — Sensor Format Registry

Extensible registry of sensor formats keyed by display name.
New formats register via register_sensor().
"""

from __future__ import annotations

from .protocols import SensorFormat


# Internal registry, insertion-ordered for display
_sensor_registry: dict[str, SensorFormat] = {}


def register_sensor(sensor: SensorFormat) -> None:
    """Register a sensor format under its display name."""
    _sensor_registry[sensor.name] = sensor


def get_sensor(name: str) -> SensorFormat:
    """Retrieve a sensor format by name. Raises KeyError if not registered."""
    if name not in _sensor_registry:
        raise KeyError(
            f"Sensor '{name}' not registered. "
            f"Available: {list(_sensor_registry.keys())}"
        )
    return _sensor_registry[name]


def list_sensors() -> list[str]:
    """Return all registered sensor names in registration order."""
    return list(_sensor_registry.keys())
