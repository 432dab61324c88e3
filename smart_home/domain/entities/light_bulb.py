"""Domain Entities - Light bulb with brightness and color."""

from typing import Any, Dict, Optional

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.errors import InvalidArgumentError
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.shared import get_logger

logger = get_logger(__name__)

MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100
DEFAULT_COLOR = "warm white"


def _check_brightness(level: int, device_id: str) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentError(
            "Brightness must be a whole number.",
            details={"device_id": device_id, "brightness": level},
        )
    if not MIN_BRIGHTNESS <= level <= MAX_BRIGHTNESS:
        raise InvalidArgumentError(
            f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}.",
            details={"device_id": device_id, "brightness": level},
        )


class LightBulb(PoweredDevice):
    """
    Dimmable bulb.

    Power draw is the flat rated wattage whenever the bulb is on;
    brightness does not scale it.
    """

    kind_label = "Light bulb"

    def __init__(
        self,
        device_id: str,
        name: str,
        power_consumption: float,
        brightness: int = MAX_BRIGHTNESS,
        color: str = DEFAULT_COLOR,
        registry: Optional[HomeRegistry] = None,
    ):
        _check_brightness(brightness, device_id)
        super().__init__(device_id, name, power_consumption, registry)
        self._brightness = brightness
        self._color = color

    @property
    def brightness(self) -> int:
        return self._brightness

    @property
    def color(self) -> str:
        return self._color

    def set_brightness(self, level: int) -> None:
        try:
            _check_brightness(level, self._device_id)
        except InvalidArgumentError:
            logger.warning(
                "light_bulb.brightness_rejected",
                device_id=self._device_id,
                brightness=level,
            )
            raise
        self._brightness = level

    def set_color(self, color: str) -> None:
        self._color = color

    def get_status(self) -> str:
        return (
            f"{self.kind_label} {self._name} {self._on_off(self._is_on)}, "
            f"brightness: {self._brightness}%, color: {self._color}, "
            f"power: {self._power_consumption:g} W"
        )

    def _clone_kwargs(self) -> Dict[str, Any]:
        kwargs = super()._clone_kwargs()
        kwargs.update(brightness=self._brightness, color=self._color)
        return kwargs
