"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import contextmanager
from typing import Iterator

from dependency_injector import containers, providers

from smart_home.application.models import DeviceDefaults
from smart_home.application.use_cases.device_use_cases import (
    CloneDeviceUseCase,
    CreateDeviceUseCase,
    GetDeviceByIdUseCase,
    GetDevicesUseCase,
    ToggleAllDevicesUseCase,
)
from smart_home.application.use_cases.scenario_use_cases import RunScenarioUseCase
from smart_home.application.use_cases.statistics_use_cases import (
    GetEnergyStatisticsUseCase,
    ResetEnergyStatisticsUseCase,
)
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.services.clock import MonotonicClock
from smart_home.domain.services.voltage_jitter import SineVoltageJitter
from smart_home.infrastructure.repositories import InMemoryDeviceRepository
from smart_home.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Domain services
    clock = providers.Singleton(MonotonicClock)

    voltage_jitter = providers.Singleton(
        SineVoltageJitter,
        seed=config.simulation.jitter_seed,
    )

    registry = providers.Singleton(HomeRegistry, clock=clock)

    registry_factory = providers.Factory(HomeRegistry, clock=clock)

    device_defaults = providers.Singleton(
        DeviceDefaults,
        brightness=config.simulation.default_brightness,
        color=config.simulation.default_bulb_color,
        temperature=config.simulation.default_temperature,
        max_current=config.simulation.default_max_current,
        nominal_voltage=config.simulation.nominal_voltage,
    )

    # Infrastructure
    device_repository = providers.Singleton(InMemoryDeviceRepository)

    repository_factory = providers.Factory(InMemoryDeviceRepository)

    # Application (use cases)
    create_device_use_case = providers.Factory(
        CreateDeviceUseCase,
        device_repository=device_repository,
        registry=registry,
        defaults=device_defaults,
        jitter=voltage_jitter,
    )

    clone_device_use_case = providers.Factory(
        CloneDeviceUseCase,
        device_repository=device_repository,
    )

    get_devices_use_case = providers.Factory(
        GetDevicesUseCase,
        device_repository=device_repository,
    )

    get_device_by_id_use_case = providers.Factory(
        GetDeviceByIdUseCase,
        device_repository=device_repository,
    )

    toggle_all_devices_use_case = providers.Factory(
        ToggleAllDevicesUseCase,
        device_repository=device_repository,
    )

    get_energy_statistics_use_case = providers.Factory(
        GetEnergyStatisticsUseCase,
        device_repository=device_repository,
        registry=registry,
    )

    reset_energy_statistics_use_case = providers.Factory(
        ResetEnergyStatisticsUseCase,
        device_repository=device_repository,
        registry=registry,
    )

    run_scenario_use_case = providers.Factory(
        RunScenarioUseCase,
        registry_factory=registry_factory.provider,
        repository_factory=repository_factory.provider,
        jitter=voltage_jitter,
        session_registry=registry,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@contextmanager
def simulation_session() -> Iterator[AppContainer]:
    """
    Scope one simulation run.

    Yields the initialized container and logs the run-wide counters
    when the run ends, whether or not it ended with an error.
    """
    container = get_container()
    logger.info("session.started")
    try:
        yield container
    finally:
        registry = container.registry()
        logger.info(
            "session.finished",
            total_devices_created=registry.get_total_devices_created(),
            total_energy_consumed_wh=registry.get_total_energy_consumed(),
        )
