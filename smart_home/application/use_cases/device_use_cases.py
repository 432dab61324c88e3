"""
Device Use Cases - Application Layer

This module defines use cases for device operations. They create,
look up, switch and copy the devices of a simulation run and project
them into DTOs.
"""

from typing import Any, Dict, List

from dependency_injector.wiring import Provide, inject

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.errors import DeviceNotFoundError, DomainError
from smart_home.domain.entities.light_bulb import LightBulb
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.entities.smart_outlet import SmartOutlet
from smart_home.domain.entities.thermostat import Thermostat
from smart_home.domain.ports.sensor import VoltageJitter
from smart_home.domain.repositories.device_repository import IDeviceRepository
from smart_home.domain.services.device_factory import kind_of, make_device
from smart_home.shared import EnumDeviceKind, get_logger

from ..dtos.device_dto import DeviceCreateDTO, DeviceStatusDTO
from ..models import DeviceDefaults

logger = get_logger(__name__)


def _device_details(device: PoweredDevice) -> Dict[str, Any]:
    if isinstance(device, LightBulb):
        return {"brightness": device.brightness, "color": device.color}
    if isinstance(device, Thermostat):
        return {
            "current_temperature": device.current_temperature,
            "target_temperature": device.target_temperature,
            "mode": device.mode.value,
        }
    if isinstance(device, SmartOutlet):
        return {
            "outlet_on": device.outlet_on,
            "voltage": device.voltage,
            "max_current": device.max_current,
            "sensor_type": device.get_sensor_type(),
        }
    return {}


def to_status_dto(device: PoweredDevice) -> DeviceStatusDTO:
    """Project a device into its status DTO."""
    return DeviceStatusDTO(
        kind=kind_of(device),
        device_id=device.device_id,
        name=device.name,
        info=device.get_device_info(),
        status=device.get_status(),
        is_on=device.is_on,
        power_consumption=device.power_consumption,
        power_usage=device.get_power_usage(),
        energy_consumed_wh=device.get_device_energy_consumed(),
        on_time=device.get_formatted_on_time(),
        details=_device_details(device),
    )


def _get_or_raise(repository: IDeviceRepository, device_id: str) -> PoweredDevice:
    device = repository.find_by_id(device_id)
    if device is None:
        raise DeviceNotFoundError(device_id)
    return device


class CreateDeviceUseCase:
    """Use case for creating a device and storing it in the run."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        registry: HomeRegistry = Provide["registry"],
        defaults: DeviceDefaults = Provide["device_defaults"],
        jitter: VoltageJitter = Provide["voltage_jitter"],
    ):
        self.device_repository = device_repository
        self.registry = registry
        self.defaults = defaults
        self.jitter = jitter

    def _kwargs_for(self, dto: DeviceCreateDTO) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "device_id": dto.device_id,
            "name": dto.name,
            "power_consumption": dto.power_consumption,
        }
        if dto.kind is EnumDeviceKind.LIGHT_BULB:
            kwargs["brightness"] = (
                self.defaults.brightness if dto.brightness is None else dto.brightness
            )
            kwargs["color"] = self.defaults.color if dto.color is None else dto.color
        elif dto.kind is EnumDeviceKind.THERMOSTAT:
            kwargs["initial_temperature"] = (
                self.defaults.temperature
                if dto.initial_temperature is None
                else dto.initial_temperature
            )
        elif dto.kind is EnumDeviceKind.SMART_OUTLET:
            kwargs["max_current"] = (
                self.defaults.max_current
                if dto.max_current is None
                else dto.max_current
            )
            kwargs["voltage"] = self.defaults.nominal_voltage
            kwargs["jitter"] = self.jitter
        return kwargs

    def execute(self, dto: DeviceCreateDTO) -> DeviceStatusDTO:
        """
        Create a device of the requested kind.

        Raises:
            InvalidConfigurationError: If the rated power is not positive.
            InvalidArgumentError: If a kind specific value is out of range.
        """
        try:
            device = make_device(
                dto.kind, registry=self.registry, **self._kwargs_for(dto)
            )
        except DomainError as e:
            logger.error(
                "devices.create_failed",
                device_id=dto.device_id,
                kind=dto.kind.value,
                error=e.message,
            )
            raise

        self.device_repository.add(device)
        logger.info("devices.created", device_id=device.device_id, kind=dto.kind.value)
        return to_status_dto(device)


class CloneDeviceUseCase:
    """Use case for copying a stored device under a fresh identity."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    def execute(self, device_id: str) -> DeviceStatusDTO:
        source = _get_or_raise(self.device_repository, device_id)
        copy = self.device_repository.add(source.clone())
        logger.info("devices.cloned", source_id=device_id, clone_id=copy.device_id)
        return to_status_dto(copy)


class GetDevicesUseCase:
    """Use case for listing the devices of the run."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    def execute(self) -> List[DeviceStatusDTO]:
        return [to_status_dto(device) for device in self.device_repository.find_all()]


class GetDeviceByIdUseCase:
    """Use case for retrieving a single device."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    def execute(self, device_id: str) -> DeviceStatusDTO:
        """
        Raises:
            DeviceNotFoundError: If no device has this ID.
        """
        return to_status_dto(_get_or_raise(self.device_repository, device_id))


class ToggleAllDevicesUseCase:
    """Use case for switching every stored device on or off."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    def execute(self, turn_on: bool) -> List[DeviceStatusDTO]:
        devices = self.device_repository.find_all()
        for device in devices:
            if turn_on:
                device.turn_on()
            else:
                device.turn_off()
        logger.info("devices.toggled_all", turn_on=turn_on, count=len(devices))
        return [to_status_dto(device) for device in devices]
