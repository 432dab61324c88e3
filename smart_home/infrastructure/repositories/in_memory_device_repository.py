"""
In-Memory Device Repository - Infrastructure Layer

Keeps the devices of a simulation run in a dict for the lifetime of
the process. Nothing is persisted.
"""

from typing import Dict, List, Optional

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.repositories.device_repository import IDeviceRepository
from smart_home.shared import get_logger

logger = get_logger(__name__)


class InMemoryDeviceRepository(IDeviceRepository):
    """Dict-backed implementation of the DeviceRepository."""

    def __init__(self) -> None:
        self._devices: Dict[str, PoweredDevice] = {}

    def find_by_id(self, device_id: str) -> Optional[PoweredDevice]:
        return self._devices.get(device_id)

    def find_all(self) -> List[PoweredDevice]:
        return list(self._devices.values())

    def add(self, device: PoweredDevice) -> PoweredDevice:
        if device.device_id in self._devices:
            logger.warning("repository.device_replaced", device_id=device.device_id)
        self._devices[device.device_id] = device
        return device

    def delete(self, device_id: str) -> bool:
        return self._devices.pop(device_id, None) is not None

    def __len__(self) -> int:
        return len(self._devices)
