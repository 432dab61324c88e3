"""
Domain Entities Package

This package contains the simulated devices and the run-scoped registry.
"""

from .device import PoweredDevice, SmartDevice
from .errors import (
    DeviceNotFoundError,
    DomainError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from .light_bulb import LightBulb
from .registry import HomeRegistry
from .smart_outlet import SmartOutlet
from .thermostat import Thermostat, ThermostatMode

__all__ = [
    "SmartDevice",
    "PoweredDevice",
    "LightBulb",
    "Thermostat",
    "ThermostatMode",
    "SmartOutlet",
    "HomeRegistry",
    "DomainError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "DeviceNotFoundError",
]
