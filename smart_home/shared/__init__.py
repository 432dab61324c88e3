"""
Shared module - Cross-cutting concerns

Constants, enums and logging helpers used by every layer of the
simulator. Nothing here may depend on the domain, application or
main layers.
"""

from .consts import (
    SECONDS_PER_HOUR,
    EnumDeviceKind,
    EnumEnvironment,
    EnumLogFormat,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumDeviceKind",
    "EnumEnvironment",
    "EnumLogFormat",
    "EnumLogLevel",
    "SECONDS_PER_HOUR",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
