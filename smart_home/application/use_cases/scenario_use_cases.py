"""
Scenario Use Cases - Application Layer

Scripted demonstrations of the device model. Each scenario runs in a
fresh registry and repository so its statistics start from zero; the
totals are then added to the session registry.
"""

from typing import Callable, Dict, List, Tuple

from dependency_injector.wiring import Provide, Provider, inject

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.errors import InvalidArgumentError
from smart_home.domain.entities.light_bulb import LightBulb
from smart_home.domain.entities.registry import HomeRegistry
from smart_home.domain.entities.smart_outlet import SmartOutlet
from smart_home.domain.entities.thermostat import Thermostat, ThermostatMode
from smart_home.domain.ports.sensor import ISensor, VoltageJitter
from smart_home.domain.repositories.device_repository import IDeviceRepository
from smart_home.shared import get_logger

from ..dtos.scenario_dto import ScenarioReportDTO
from .statistics_use_cases import build_statistics

logger = get_logger(__name__)


class _Run:
    """State shared by the steps of one scenario."""

    def __init__(
        self,
        registry: HomeRegistry,
        repository: IDeviceRepository,
        jitter: VoltageJitter,
    ):
        self.registry = registry
        self.repository = repository
        self.jitter = jitter
        self.lines: List[str] = []

    def say(self, line: str) -> None:
        self.lines.append(line)

    def lamp(self, device_id: str, name: str, brightness: int, color: str) -> LightBulb:
        device = LightBulb(
            device_id, name, 60, brightness, color, registry=self.registry
        )
        self.repository.add(device)
        return device

    def thermostat(
        self, device_id: str, name: str, watts: float, temp: float
    ) -> Thermostat:
        device = Thermostat(device_id, name, watts, temp, registry=self.registry)
        self.repository.add(device)
        return device

    def outlet(self, device_id: str, name: str) -> SmartOutlet:
        device = SmartOutlet(
            device_id, name, 5, 16, registry=self.registry, jitter=self.jitter
        )
        self.repository.add(device)
        return device

    def trio(self, suffix: str) -> Tuple[LightBulb, Thermostat, SmartOutlet]:
        return (
            self.lamp(f"LB_{suffix}", "Living room lamp", 75, "warm white"),
            self.thermostat(f"TH_{suffix}", "Bedroom thermostat", 1000, 22.5),
            self.outlet(f"SO_{suffix}", "Hallway outlet"),
        )


def _basic(run: _Run) -> None:
    devices: List[PoweredDevice] = list(run.trio("BASIC"))
    for device in devices:
        run.say(device.get_device_info())
    run.say(f"Devices created: {run.registry.get_total_devices_created()}")
    for device in devices:
        run.say(device.get_status())


def _polymorphism(run: _Run) -> None:
    devices: List[PoweredDevice] = list(run.trio("POLY"))
    for device in devices:
        device.turn_on()
        run.say(device.get_status())
    for device in devices:
        device.turn_off()
        run.say(device.get_status())


def _statistics(run: _Run) -> None:
    run.registry.reset_energy_consumption()
    devices: List[PoweredDevice] = list(run.trio("STAT"))
    for device in devices:
        device.turn_on()
    for device in devices:
        device.turn_off()
    run.say(f"Devices created: {run.registry.get_total_devices_created()}")
    run.say(f"Energy consumed: {run.registry.get_total_energy_consumed():.4f} Wh")


def _copy(run: _Run) -> None:
    original = run.lamp("LB1", "Lamp 1", 75, "white")
    copy = original.clone()
    run.repository.add(copy)

    original.turn_on()
    copy.turn_off()
    run.say(f"Original {original.device_id} on: {original.is_on}")
    run.say(f"Copy {copy.device_id} on: {copy.is_on}")

    original.set_brightness(100)
    copy.set_brightness(50)
    run.say(f"Original brightness: {original.brightness}%")
    run.say(f"Copy brightness: {copy.brightness}%")


def _sensor(run: _Run) -> None:
    outlet = run.outlet("SO_SENSOR", "Outlet with sensor")
    outlet.turn_on()
    outlet.toggle_outlet()
    run.say(outlet.get_status())
    if isinstance(outlet, ISensor):
        run.say(f"Sensor type: {outlet.get_sensor_type()}")
        run.say(f"Voltage: {outlet.get_current_voltage():.1f} V")
        run.say(f"Power: {outlet.get_current_power():g} W")


def _errors(run: _Run) -> None:
    lamp = run.lamp("LB_ERR", "Test lamp", 50, "white")
    thermostat = run.thermostat("TH_ERR", "Test thermostat", 1000, 22.0)

    for label, action in (
        ("brightness 150", lambda: lamp.set_brightness(150)),
        ("mode 'unknown'", lambda: thermostat.set_mode("unknown")),
    ):
        try:
            action()
            run.say(f"{label}: accepted")
        except InvalidArgumentError as e:
            run.say(f"{label}: rejected ({e.message})")

    lamp.set_brightness(80)
    thermostat.set_mode(ThermostatMode.COOLING)
    run.say(
        f"Valid values applied: brightness {lamp.brightness}%, "
        f"mode {thermostat.mode.value}"
    )


def _full(run: _Run) -> None:
    lamp, thermostat, outlet = run.trio("FULL")
    lamp.set_brightness(85)

    lamp.turn_on()
    thermostat.turn_on()
    thermostat.set_target_temperature(25.0)
    thermostat.set_mode(ThermostatMode.HEATING)
    outlet.turn_on()
    outlet.toggle_outlet()
    for device in (lamp, thermostat, outlet):
        run.say(device.get_status())

    lamp.set_brightness(95)
    lamp.set_color("blue")
    thermostat.update_temperature(24.0)
    run.say(f"Lamp: brightness {lamp.brightness}%, color {lamp.color}")
    run.say(
        f"Thermostat: current {thermostat.current_temperature:.1f}C, "
        f"draw {thermostat.get_power_usage():g} W"
    )
    run.say(f"Outlet voltage: {outlet.get_current_voltage():.1f} V")

    for device in (lamp, thermostat, outlet):
        device.turn_off()
        run.say(
            f"{device.name}: on for {device.get_formatted_on_time()}, "
            f"{device.get_device_energy_consumed():.4f} Wh"
        )
    run.say(f"Devices created: {run.registry.get_total_devices_created()}")
    run.say(f"Energy consumed: {run.registry.get_total_energy_consumed():.4f} Wh")


SCENARIOS: Dict[str, Tuple[str, Callable[[_Run], None]]] = {
    "basic": ("Device creation and status", _basic),
    "polymorphism": ("Switching devices through the base type", _polymorphism),
    "statistics": ("Run-wide device and energy counters", _statistics),
    "copy": ("Copies get a fresh identity and independent state", _copy),
    "sensor": ("Smart outlet as a voltage sensor", _sensor),
    "errors": ("Rejected values leave devices unchanged", _errors),
    "full": ("Complete walkthrough", _full),
}


class RunScenarioUseCase:
    """Use case for running a named demonstration scenario."""

    @inject
    def __init__(
        self,
        registry_factory: Callable[[], HomeRegistry] = Provider["registry_factory"],
        repository_factory: Callable[[], IDeviceRepository] = Provider[
            "repository_factory"
        ],
        jitter: VoltageJitter = Provide["voltage_jitter"],
        session_registry: HomeRegistry = Provide["registry"],
    ):
        self.registry_factory = registry_factory
        self.repository_factory = repository_factory
        self.jitter = jitter
        self.session_registry = session_registry

    def execute(self, name: str) -> ScenarioReportDTO:
        """
        Run a scenario by name and add its totals to the session registry.

        Raises:
            InvalidArgumentError: If no scenario has this name.
        """
        if name not in SCENARIOS:
            raise InvalidArgumentError(
                f"Unknown scenario: {name}", details={"known": sorted(SCENARIOS)}
            )
        title, steps = SCENARIOS[name]

        run = _Run(self.registry_factory(), self.repository_factory(), self.jitter)
        logger.info("scenario.started", scenario=name)
        steps(run)
        report = ScenarioReportDTO(
            name=name,
            title=title,
            lines=run.lines,
            statistics=build_statistics(run.registry, run.repository),
        )
        self.session_registry.absorb(run.registry)
        logger.info("scenario.completed", scenario=name, lines=len(report.lines))
        return report
