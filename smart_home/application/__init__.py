"""
Application Layer Package

Use cases orchestrating the simulated devices held in a repository,
and the DTOs they return.
"""

# Re-export submodules
from smart_home.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
