"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the simulated devices
and implement the operations exposed by the entry points.
"""

from .device_use_cases import (
    CloneDeviceUseCase,
    CreateDeviceUseCase,
    GetDeviceByIdUseCase,
    GetDevicesUseCase,
    ToggleAllDevicesUseCase,
    to_status_dto,
)
from .scenario_use_cases import SCENARIOS, RunScenarioUseCase
from .statistics_use_cases import (
    GetEnergyStatisticsUseCase,
    ResetEnergyStatisticsUseCase,
    build_statistics,
)

__all__ = [
    "CreateDeviceUseCase",
    "CloneDeviceUseCase",
    "GetDevicesUseCase",
    "GetDeviceByIdUseCase",
    "ToggleAllDevicesUseCase",
    "GetEnergyStatisticsUseCase",
    "ResetEnergyStatisticsUseCase",
    "RunScenarioUseCase",
    "SCENARIOS",
    "build_statistics",
    "to_status_dto",
]
