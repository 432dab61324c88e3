"""Domain port for devices that expose simulated physical readings."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

VoltageJitter = Callable[[int], float]
"""Maps the sensor read counter to an offset in volts."""


@runtime_checkable
class ISensor(Protocol):
    """Sensor capability: a voltage and power reading plus a type label."""

    def get_current_voltage(self) -> float:
        """Return the current simulated voltage in volts."""
        ...

    def get_current_power(self) -> float:
        """Return the current power draw in watts."""
        ...

    def get_sensor_type(self) -> str:
        """Return a human readable sensor label."""
        ...
