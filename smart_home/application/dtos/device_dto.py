"""
Device DTOs - Application Layer

Data Transfer Objects projecting simulated devices and the registry
totals out of the domain layer.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from smart_home.shared import EnumDeviceKind


class DeviceCreateDTO(BaseModel):
    """DTO for creating a device."""

    kind: EnumDeviceKind = Field(description="Device kind")
    device_id: str = Field(min_length=1, description="Caller supplied device ID")
    name: str = Field(min_length=1, description="Display name")
    power_consumption: float = Field(description="Rated power in watts")
    brightness: Optional[int] = Field(
        default=None, description="Initial brightness (light bulb only)"
    )
    color: Optional[str] = Field(
        default=None, description="Initial color (light bulb only)"
    )
    initial_temperature: Optional[float] = Field(
        default=None, description="Initial temperature in C (thermostat only)"
    )
    max_current: Optional[float] = Field(
        default=None, description="Maximum current in A (smart outlet only)"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "kind": "light_bulb",
                "device_id": "LB1",
                "name": "Living room lamp",
                "power_consumption": 60,
                "brightness": 75,
                "color": "white",
            }
        }
    }


class DeviceStatusDTO(BaseModel):
    """DTO projecting a device's state."""

    kind: EnumDeviceKind = Field(description="Device kind")
    device_id: str = Field(description="Device ID")
    name: str = Field(description="Display name")
    info: str = Field(description="Identity line")
    status: str = Field(description="Human readable status")
    is_on: bool = Field(description="Whether the device is switched on")
    power_consumption: float = Field(description="Rated power in watts")
    power_usage: float = Field(description="Current draw in watts")
    energy_consumed_wh: float = Field(description="Energy consumed in Wh")
    on_time: str = Field(description="Formatted accumulated on time")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Kind specific attributes"
    )


class DeviceEnergyDTO(BaseModel):
    """Per-device entry of the energy statistics."""

    device_id: str
    name: str
    power_usage: float
    on_time_hours: float
    energy_consumed_wh: float


class EnergyStatisticsDTO(BaseModel):
    """DTO for aggregate energy statistics of a run."""

    total_devices_created: int = Field(description="Devices created in this run")
    stored_devices: int = Field(description="Devices currently held")
    devices_on: int = Field(description="Devices currently switched on")
    total_energy_consumed_wh: float = Field(
        description="Energy of finished sessions across all devices, in Wh"
    )
    current_power_usage: float = Field(description="Combined live draw in watts")
    devices: List[DeviceEnergyDTO] = Field(default_factory=list)
