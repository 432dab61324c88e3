"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the entry points.
"""

from .device_dto import (
    DeviceCreateDTO,
    DeviceEnergyDTO,
    DeviceStatusDTO,
    EnergyStatisticsDTO,
)
from .scenario_dto import ScenarioReportDTO

__all__ = [
    "DeviceCreateDTO",
    "DeviceEnergyDTO",
    "DeviceStatusDTO",
    "EnergyStatisticsDTO",
    "ScenarioReportDTO",
]
