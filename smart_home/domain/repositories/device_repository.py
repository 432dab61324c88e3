"""
Device Repository Interface

Abstracts storage of the devices that belong to one simulation run.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from smart_home.domain.entities.device import PoweredDevice


class IDeviceRepository(ABC):
    """Interface for device repository implementations."""

    @abstractmethod
    def find_by_id(self, device_id: str) -> Optional[PoweredDevice]:
        """
        Find a device by its ID.

        Args:
            device_id: Identifier supplied when the device was created

        Returns:
            The device if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[PoweredDevice]:
        """Return every stored device in insertion order."""
        pass

    @abstractmethod
    def add(self, device: PoweredDevice) -> PoweredDevice:
        """
        Store a device.

        A device whose ID is already present replaces the stored one;
        IDs are not required to be unique across the run.
        """
        pass

    @abstractmethod
    def delete(self, device_id: str) -> bool:
        """Remove a device; returns False when it was not stored."""
        pass
