"""Application-level models."""

from .device_defaults import DeviceDefaults

__all__ = ["DeviceDefaults"]
