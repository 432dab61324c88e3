"""
Domain Entities - Smart Outlet

A powered outlet that also acts as a voltage sensor. Energy accounting
comes from PoweredDevice; the sensor side satisfies ISensor.
"""

from typing import Any, Dict, Optional

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.ports.sensor import VoltageJitter
from smart_home.domain.services.voltage_jitter import SineVoltageJitter
from smart_home.shared import get_logger

logger = get_logger(__name__)

NOMINAL_VOLTAGE = 220.0
DEFAULT_MAX_CURRENT = 16.0
SENSOR_TYPE = "Voltage sensor"


class SmartOutlet(PoweredDevice):
    """Switchable outlet with a simulated voltage sensor."""

    kind_label = "Smart outlet with sensor"

    def __init__(
        self,
        device_id: str,
        name: str,
        power_consumption: float,
        max_current: float = DEFAULT_MAX_CURRENT,
        registry: Optional[HomeRegistry] = None,
        voltage: float = NOMINAL_VOLTAGE,
        jitter: Optional[VoltageJitter] = None,
    ):
        super().__init__(device_id, name, power_consumption, registry)
        self._outlet_on = False
        self._voltage = float(voltage)
        self._max_current = float(max_current)
        self._jitter: VoltageJitter = (
            jitter if jitter is not None else SineVoltageJitter()
        )
        self._read_count = 0

    @property
    def outlet_on(self) -> bool:
        return self._outlet_on

    @property
    def voltage(self) -> float:
        """Nominal voltage the sensor readings oscillate around."""
        return self._voltage

    @property
    def max_current(self) -> float:
        return self._max_current

    @property
    def read_count(self) -> int:
        return self._read_count

    def turn_on(self) -> None:
        was_on = self._is_on
        super().turn_on()
        if not was_on:
            self._outlet_on = True

    def turn_off(self) -> None:
        super().turn_off()
        self._outlet_on = False

    def toggle_outlet(self) -> bool:
        """
        Flip the outlet relay and return its new state.

        An unpowered outlet cannot be engaged, so the call is ignored
        while the device is off.
        """
        if not self._is_on:
            logger.warning("outlet.toggle_rejected", device_id=self._device_id)
            return self._outlet_on
        self._outlet_on = not self._outlet_on
        logger.debug(
            "outlet.toggled", device_id=self._device_id, outlet_on=self._outlet_on
        )
        return self._outlet_on

    def get_current_voltage(self) -> float:
        reading = self._voltage + self._jitter(self._read_count)
        self._read_count += 1
        return reading

    def get_current_power(self) -> float:
        return self.get_power_usage()

    def get_sensor_type(self) -> str:
        return SENSOR_TYPE

    def get_power_usage(self) -> float:
        if not self._is_on or not self._outlet_on:
            return 0.0
        return self._power_consumption

    def get_status(self) -> str:
        outlet_state = "active" if self._outlet_on else "inactive"
        return (
            f"Smart outlet {self._name} {self._on_off(self._is_on)}, "
            f"outlet: {outlet_state}, max current: {self._max_current:g} A, "
            f"power: {self._power_consumption:g} W"
        )

    def _clone_kwargs(self) -> Dict[str, Any]:
        kwargs = super()._clone_kwargs()
        kwargs.update(
            max_current=self._max_current,
            voltage=self._voltage,
            jitter=self._jitter,
        )
        return kwargs
