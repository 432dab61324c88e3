from __future__ import annotations

import argparse

import pytest
from pydantic import ValidationError

from smart_home.main import container as container_module
from smart_home.main.config import AppSettings, SimulationSettings, get_settings
from smart_home.main.runner import build_parser, main, parse_device
from smart_home.shared import (
    EnumDeviceKind,
    EnumEnvironment,
    EnumLogFormat,
    EnumLogLevel,
)


def test_settings_defaults(monkeypatch) -> None:
    for key in (
        "SIM_NOMINAL_VOLTAGE",
        "SIM_JITTER_SEED",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.environment is EnumEnvironment.DEVELOPMENT
    assert settings.logging.level is EnumLogLevel.INFO
    assert settings.logging.format is None
    assert settings.simulation.nominal_voltage == 220.0
    assert settings.simulation.jitter_seed is None
    assert settings.simulation.default_bulb_color == "warm white"


def test_simulation_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SIM_NOMINAL_VOLTAGE", "110")
    monkeypatch.setenv("SIM_JITTER_SEED", "9")

    settings = AppSettings()

    assert settings.simulation.nominal_voltage == 110.0
    assert settings.simulation.jitter_seed == 9


def test_logging_format_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LOG_FORMAT", "json")

    settings = AppSettings()

    assert settings.logging.format is EnumLogFormat.JSON


def test_simulation_settings_validate_brightness() -> None:
    with pytest.raises(ValidationError):
        SimulationSettings(default_brightness=150)


def test_parser_accepts_several_scenarios() -> None:
    args = build_parser().parse_args(["basic", "copy"])
    assert args.scenarios == ["basic", "copy"]


def test_runner_runs_scenarios(monkeypatch) -> None:
    monkeypatch.setenv("SIM_JITTER_SEED", "1")
    assert main(["basic", "sensor"]) == 0


def test_runner_defaults_to_full_walkthrough() -> None:
    assert main([]) == 0


def test_runner_reports_unknown_scenario() -> None:
    assert main(["teleport"]) == 1


def test_parse_device_option() -> None:
    dto = parse_device("thermostat:TH1:Bedroom:1000")

    assert dto.kind is EnumDeviceKind.THERMOSTAT
    assert dto.device_id == "TH1"
    assert dto.name == "Bedroom"
    assert dto.power_consumption == 1000.0


@pytest.mark.parametrize(
    "value",
    ["light_bulb:LB1:Lamp", "toaster:T1:Toaster:900", "smart_outlet:SO1:Plug:x"],
)
def test_parse_device_option_rejects_malformed(value) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_device(value)


def test_runner_adds_scenario_totals_to_session() -> None:
    assert main(["basic", "copy"]) == 0

    registry = container_module.get_container().registry()
    assert registry.get_total_devices_created() == 5


def test_runner_builds_session_devices() -> None:
    argv = [
        "--device",
        "light_bulb:LB1:Lamp:60",
        "--device",
        "smart_outlet:SO1:Plug:5",
        "--clone",
        "LB1",
        "--show",
        "LB1_copy",
    ]

    assert main(argv) == 0

    container = container_module.get_container()
    devices = container.device_repository().find_all()
    assert [device.device_id for device in devices] == ["LB1", "SO1", "LB1_copy"]
    assert all(not device.is_on for device in devices)
    assert container.registry().get_total_devices_created() == 3


def test_runner_reset_energy_zeroes_session_total() -> None:
    assert main(["full", "--device", "light_bulb:LB1:Lamp:60", "--reset-energy"]) == 0

    registry = container_module.get_container().registry()
    assert registry.get_total_energy_consumed() == 0.0
    assert registry.get_total_devices_created() == 4


def test_runner_reports_unknown_session_device() -> None:
    assert main(["--device", "light_bulb:LB1:Lamp:60", "--clone", "LB9"]) == 1


def test_runner_reports_invalid_session_device() -> None:
    assert main(["--device", "light_bulb:LB1:Lamp:0"]) == 1
