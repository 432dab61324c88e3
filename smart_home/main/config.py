"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smart_home.shared import EnumEnvironment, EnumLogFormat, EnumLogLevel


class SimulationSettings(BaseSettings):
    """Defaults applied to simulated devices."""

    nominal_voltage: float = Field(
        default=220.0, gt=0, description="Nominal mains voltage in volts"
    )
    jitter_seed: Optional[int] = Field(
        default=None, description="Seed for the voltage jitter (random if None)"
    )
    default_max_current: float = Field(
        default=16.0, gt=0, description="Smart outlet maximum current in amps"
    )
    default_bulb_color: str = Field(
        default="warm white", description="Light bulb color when none is given"
    )
    default_brightness: int = Field(
        default=100,
        ge=0,
        le=100,
        description="Light bulb brightness when none is given",
    )
    default_temperature: float = Field(
        default=20.0, description="Thermostat initial temperature in C"
    )

    model_config = SettingsConfigDict(
        env_prefix="SIM_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: Optional[EnumLogFormat] = Field(
        default=None,
        description="Log renderer (if None, JSON in production, console otherwise)",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings per environment.
    """
    return AppSettings()
