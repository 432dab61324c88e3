"""Domain ports package."""

from .clock import IClock
from .sensor import ISensor, VoltageJitter

__all__ = ["IClock", "ISensor", "VoltageJitter"]
