"""
Repositories Package - Infrastructure Layer

This package contains concrete implementations of the repository
interfaces defined in the domain layer.
"""

from .in_memory_device_repository import InMemoryDeviceRepository

__all__ = ["InMemoryDeviceRepository"]
