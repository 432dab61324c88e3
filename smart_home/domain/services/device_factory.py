"""Domain service that builds devices from a kind name."""

from typing import Any, Dict, Optional, Type, Union

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.errors import InvalidConfigurationError
from smart_home.domain.entities.light_bulb import LightBulb
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.entities.smart_outlet import SmartOutlet
from smart_home.domain.entities.thermostat import Thermostat
from smart_home.shared import EnumDeviceKind

DEVICE_TYPES: Dict[EnumDeviceKind, Type[PoweredDevice]] = {
    EnumDeviceKind.LIGHT_BULB: LightBulb,
    EnumDeviceKind.THERMOSTAT: Thermostat,
    EnumDeviceKind.SMART_OUTLET: SmartOutlet,
}


def kind_of(device: PoweredDevice) -> EnumDeviceKind:
    for kind, cls in DEVICE_TYPES.items():
        if isinstance(device, cls):
            return kind
    raise InvalidConfigurationError(
        f"Unsupported device type: {type(device).__name__}"
    )


def make_device(
    kind: Union[EnumDeviceKind, str],
    registry: Optional[HomeRegistry] = None,
    **kwargs: Any,
) -> PoweredDevice:
    """
    Instantiate a device of the given kind.

    Raises:
        InvalidConfigurationError: If ``kind`` is not a known device kind.
    """
    try:
        key = EnumDeviceKind(kind)
    except ValueError:
        raise InvalidConfigurationError(
            f"Unknown device kind: {kind}",
            details={"known": [k.value for k in EnumDeviceKind]},
        ) from None
    return DEVICE_TYPES[key](registry=registry, **kwargs)
