"""
Domain Entities - Device

Base classes for every simulated device: identity and on/off state in
SmartDevice, rated wattage and on-time energy accounting in
PoweredDevice. Concrete devices live in their own modules.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TypeVar

from smart_home.domain.entities.errors import InvalidConfigurationError
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.shared import SECONDS_PER_HOUR, get_logger

logger = get_logger(__name__)

TDevice = TypeVar("TDevice", bound="SmartDevice")


class SmartDevice(ABC):
    """Abstract device with an identity and an on/off flag."""

    kind_label: str = "Device"

    def __init__(
        self,
        device_id: str,
        name: str,
        registry: Optional[HomeRegistry] = None,
    ):
        self._device_id = device_id
        self._name = name
        self._is_on = False
        self._registry = registry if registry is not None else HomeRegistry()
        self._registry.register_device(device_id)

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_on(self) -> bool:
        return self._is_on

    @property
    def registry(self) -> HomeRegistry:
        return self._registry

    @abstractmethod
    def turn_on(self) -> None:
        """Switch the device on; no-op when already on."""

    @abstractmethod
    def turn_off(self) -> None:
        """Switch the device off; no-op when already off."""

    @abstractmethod
    def get_status(self) -> str:
        """Human readable snapshot of the device state."""

    def get_device_info(self) -> str:
        return f"Device: {self._name} (ID: {self._device_id})"

    def clone(self: TDevice) -> TDevice:
        """
        Copy this device under a fresh identity.

        The copy keeps configuration attributes, starts switched off with
        no timing history and is counted in the same registry.
        """
        copy = type(self)(
            device_id=f"{self._device_id}_copy",
            name=f"{self._name} (copy)",
            registry=self._registry,
            **self._clone_kwargs(),
        )
        logger.debug(
            "device.cloned", source_id=self._device_id, clone_id=copy.device_id
        )
        return copy

    def _clone_kwargs(self) -> Dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(device_id={self._device_id!r}, "
            f"name={self._name!r}, is_on={self._is_on!r})"
        )


class PoweredDevice(SmartDevice):
    """Device with a rated wattage that accumulates on-time and energy."""

    def __init__(
        self,
        device_id: str,
        name: str,
        power_consumption: float,
        registry: Optional[HomeRegistry] = None,
    ):
        if power_consumption <= 0:
            raise InvalidConfigurationError(
                "Rated power consumption must be greater than 0.",
                details={
                    "device_id": device_id,
                    "power_consumption": power_consumption,
                },
            )
        super().__init__(device_id, name, registry)
        self._power_consumption = float(power_consumption)
        self._last_turn_on_time: Optional[float] = None
        self._total_on_time = 0.0

    @property
    def power_consumption(self) -> float:
        return self._power_consumption

    @property
    def total_on_time(self) -> float:
        """Seconds spent on across finished sessions."""
        return self._total_on_time

    def turn_on(self) -> None:
        if self._is_on:
            return
        self._is_on = True
        self._last_turn_on_time = self._registry.clock.now()
        logger.debug("device.turned_on", device_id=self._device_id)

    def turn_off(self) -> None:
        if not self._is_on:
            return
        elapsed = self.get_current_session_time()
        self._is_on = False
        self._last_turn_on_time = None
        self._total_on_time += elapsed
        watt_hours = self._power_consumption * elapsed / SECONDS_PER_HOUR
        self._registry.record_energy(self._device_id, watt_hours)
        logger.debug(
            "device.turned_off",
            device_id=self._device_id,
            session_seconds=elapsed,
            watt_hours=watt_hours,
        )

    def get_power_usage(self) -> float:
        """Instantaneous draw in watts."""
        return self._power_consumption if self._is_on else 0.0

    def get_current_session_time(self) -> float:
        if not self._is_on or self._last_turn_on_time is None:
            return 0.0
        return max(0.0, self._registry.clock.now() - self._last_turn_on_time)

    def get_total_on_time(self) -> float:
        return self._total_on_time

    def get_on_time_in_hours(self) -> float:
        on_seconds = self._total_on_time + self.get_current_session_time()
        return on_seconds / SECONDS_PER_HOUR

    def get_device_energy_consumed(self) -> float:
        """Energy in watt-hours, including the running session."""
        return self._power_consumption * self.get_on_time_in_hours()

    def get_formatted_on_time(self) -> str:
        total_seconds = int(self._total_on_time + self.get_current_session_time())
        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        parts = []
        if hours > 0:
            parts.append(f"{hours}h")
        if minutes > 0 or hours > 0:
            parts.append(f"{minutes}min")
        parts.append(f"{seconds}s")
        return " ".join(parts)

    def get_device_info(self) -> str:
        return f"{super().get_device_info()} [{self.kind_label}]"

    def _clone_kwargs(self) -> Dict[str, Any]:
        return {"power_consumption": self._power_consumption}

    @staticmethod
    def _on_off(is_on: bool) -> str:
        return "ON" if is_on else "OFF"
