"""
Domain services package.

The device factory depends on the entities and is imported from
``smart_home.domain.services.device_factory`` directly.
"""

from .clock import MonotonicClock
from .voltage_jitter import SineVoltageJitter, no_jitter

__all__ = ["MonotonicClock", "SineVoltageJitter", "no_jitter"]
