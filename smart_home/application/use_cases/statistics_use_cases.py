"""
Statistics Use Cases - Application Layer

Aggregate energy figures for the devices of a run.
"""

from dependency_injector.wiring import Provide, inject

from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.repositories.device_repository import IDeviceRepository
from smart_home.shared import get_logger

from ..dtos.device_dto import DeviceEnergyDTO, EnergyStatisticsDTO

logger = get_logger(__name__)


def build_statistics(
    registry: HomeRegistry, device_repository: IDeviceRepository
) -> EnergyStatisticsDTO:
    devices = device_repository.find_all()
    entries = [
        DeviceEnergyDTO(
            device_id=device.device_id,
            name=device.name,
            power_usage=device.get_power_usage(),
            on_time_hours=device.get_on_time_in_hours(),
            energy_consumed_wh=device.get_device_energy_consumed(),
        )
        for device in devices
    ]
    return EnergyStatisticsDTO(
        total_devices_created=registry.get_total_devices_created(),
        stored_devices=len(devices),
        devices_on=sum(1 for device in devices if device.is_on),
        total_energy_consumed_wh=registry.get_total_energy_consumed(),
        current_power_usage=sum(entry.power_usage for entry in entries),
        devices=entries,
    )


class GetEnergyStatisticsUseCase:
    """Use case for reading device counts and energy totals."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        registry: HomeRegistry = Provide["registry"],
    ):
        self.device_repository = device_repository
        self.registry = registry

    def execute(self) -> EnergyStatisticsDTO:
        return build_statistics(self.registry, self.device_repository)


class ResetEnergyStatisticsUseCase:
    """Use case for zeroing the run-wide energy total."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        registry: HomeRegistry = Provide["registry"],
    ):
        self.device_repository = device_repository
        self.registry = registry

    def execute(self) -> EnergyStatisticsDTO:
        self.registry.reset_energy_consumption()
        logger.info("statistics.reset")
        return build_statistics(self.registry, self.device_repository)
