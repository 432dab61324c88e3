"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidArgumentError(DomainError):
    """Raised when an operation receives a value outside its accepted range."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InvalidConfigurationError(DomainError):
    """Raised when a device cannot be built from the given configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class DeviceNotFoundError(DomainError):
    """Raised when a device cannot be found."""

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"Device with ID {device_id} not found"
        super().__init__(message, details)
