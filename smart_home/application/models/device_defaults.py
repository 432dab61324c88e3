"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceDefaults:
    """Subset of simulation settings used when creating devices."""

    brightness: int = 100
    color: str = "warm white"
    temperature: float = 20.0
    max_current: float = 16.0
    nominal_voltage: float = 220.0
