"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, here the in-memory storage of simulated devices.
"""

from smart_home.infrastructure import repositories

__all__ = ["repositories"]
