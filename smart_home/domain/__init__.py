"""
Domain Layer Package

Devices, the registry, ports and pure domain services. Nothing here
depends on frameworks or on the outer layers.
"""

# Re-export submodules
from smart_home.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
