"""
Domain Entities - Thermostat

A heating/cooling controller whose power draw grows with the distance
between the target and the measured temperature.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.errors import InvalidArgumentError
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.shared import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPERATURE = 20.0
BASE_LOAD_FACTOR = 0.5
DEGREES_PER_LOAD_UNIT = 10.0


class ThermostatMode(str, Enum):
    """Operating mode of a thermostat."""

    OFF = "off"
    HEATING = "heating"
    COOLING = "cooling"


class Thermostat(PoweredDevice):
    """Thermostat with current/target temperature and an operating mode."""

    kind_label = "Thermostat"

    def __init__(
        self,
        device_id: str,
        name: str,
        power_consumption: float,
        initial_temperature: float = DEFAULT_TEMPERATURE,
        registry: Optional[HomeRegistry] = None,
        target_temperature: Optional[float] = None,
    ):
        super().__init__(device_id, name, power_consumption, registry)
        self._current_temperature = float(initial_temperature)
        self._target_temperature = float(
            initial_temperature if target_temperature is None else target_temperature
        )
        self._mode = ThermostatMode.OFF

    @property
    def current_temperature(self) -> float:
        return self._current_temperature

    @property
    def target_temperature(self) -> float:
        return self._target_temperature

    @property
    def mode(self) -> ThermostatMode:
        return self._mode

    def turn_on(self) -> None:
        was_on = self._is_on
        super().turn_on()
        if not was_on and self._mode is ThermostatMode.OFF:
            self._mode = ThermostatMode.HEATING

    def turn_off(self) -> None:
        super().turn_off()
        self._mode = ThermostatMode.OFF

    def set_mode(self, mode: Union[ThermostatMode, str]) -> None:
        """
        Switch the operating mode.

        A non-off mode on a switched-off thermostat turns it on first;
        the requested mode then takes precedence over the default heating.

        Raises:
            InvalidArgumentError: If ``mode`` is not a known mode.
        """
        try:
            new_mode = ThermostatMode(mode)
        except ValueError:
            logger.warning(
                "thermostat.mode_rejected", device_id=self._device_id, mode=mode
            )
            raise InvalidArgumentError(
                "Mode must be one of: "
                + ", ".join(f"'{m.value}'" for m in ThermostatMode),
                details={"device_id": self._device_id, "mode": mode},
            ) from None

        if new_mode is not ThermostatMode.OFF and not self._is_on:
            self.turn_on()
        self._mode = new_mode
        logger.debug(
            "thermostat.mode_changed", device_id=self._device_id, mode=new_mode.value
        )

    def set_target_temperature(self, temperature: float) -> None:
        self._target_temperature = float(temperature)
        if not self._is_on and self._target_temperature != self._current_temperature:
            self.turn_on()

    def update_temperature(self, temperature: float) -> None:
        """Feed a new sensor reading."""
        self._current_temperature = float(temperature)

    def get_power_usage(self) -> float:
        if not self._is_on or self._mode is ThermostatMode.OFF:
            return 0.0
        delta = abs(self._target_temperature - self._current_temperature)
        return self._power_consumption * (
            BASE_LOAD_FACTOR + delta / DEGREES_PER_LOAD_UNIT
        )

    def get_status(self) -> str:
        return (
            f"{self.kind_label} {self._name} {self._on_off(self._is_on)}, "
            f"current: {self._current_temperature:.1f}C, "
            f"target: {self._target_temperature:.1f}C, "
            f"mode: {self._mode.value}, "
            f"power: {self._power_consumption:g} W"
        )

    def _clone_kwargs(self) -> Dict[str, Any]:
        kwargs = super()._clone_kwargs()
        kwargs.update(
            initial_temperature=self._current_temperature,
            target_temperature=self._target_temperature,
        )
        return kwargs
