from __future__ import annotations

import pytest

from smart_home.domain.entities.errors import InvalidArgumentError
from smart_home.domain.entities.thermostat import Thermostat, ThermostatMode


def test_thermostat_defaults(thermostat: Thermostat) -> None:
    assert thermostat.mode is ThermostatMode.OFF
    assert thermostat.current_temperature == 20.0
    assert thermostat.target_temperature == 20.0


def test_turn_on_switches_off_mode_to_heating(thermostat: Thermostat) -> None:
    thermostat.turn_on()

    assert thermostat.is_on is True
    assert thermostat.mode is ThermostatMode.HEATING


def test_turn_on_keeps_explicit_mode(thermostat: Thermostat) -> None:
    thermostat.set_mode("cooling")
    thermostat.turn_off()
    thermostat.set_mode(ThermostatMode.COOLING)

    assert thermostat.is_on is True
    assert thermostat.mode is ThermostatMode.COOLING


def test_turn_on_while_on_keeps_off_mode(thermostat: Thermostat) -> None:
    thermostat.turn_on()
    thermostat.set_mode("off")

    thermostat.turn_on()

    assert thermostat.is_on is True
    assert thermostat.mode is ThermostatMode.OFF
    assert thermostat.get_power_usage() == 0.0


def test_turn_off_resets_mode(thermostat: Thermostat) -> None:
    thermostat.set_mode("cooling")
    thermostat.turn_off()

    assert thermostat.is_on is False
    assert thermostat.mode is ThermostatMode.OFF


def test_invalid_mode_is_rejected_without_side_effects(thermostat: Thermostat) -> None:
    with pytest.raises(InvalidArgumentError) as exc:
        thermostat.set_mode("invalid")

    assert exc.value.details["mode"] == "invalid"
    assert thermostat.is_on is False
    assert thermostat.mode is ThermostatMode.OFF


def test_set_heating_mode_turns_device_on(registry) -> None:
    thermostat = Thermostat("TH1", "Thermostat", 1000, 20.0, registry=registry)

    with pytest.raises(InvalidArgumentError):
        thermostat.set_mode("invalid")
    thermostat.set_mode("heating")

    assert thermostat.is_on is True
    assert thermostat.mode is ThermostatMode.HEATING


def test_set_off_mode_does_not_turn_on(thermostat: Thermostat) -> None:
    thermostat.set_mode("off")
    assert thermostat.is_on is False


def test_set_target_temperature_turns_on_when_different(thermostat: Thermostat) -> None:
    thermostat.set_target_temperature(25.0)

    assert thermostat.target_temperature == 25.0
    assert thermostat.is_on is True


def test_set_target_temperature_equal_to_current_stays_off(thermostat: Thermostat) -> None:
    thermostat.set_target_temperature(20.0)
    assert thermostat.is_on is False


def test_update_temperature_is_unconditional(thermostat: Thermostat) -> None:
    thermostat.update_temperature(-40.5)
    assert thermostat.current_temperature == -40.5
    assert thermostat.is_on is False


def test_power_usage_zero_when_off_or_mode_off(thermostat: Thermostat) -> None:
    thermostat.update_temperature(10.0)
    thermostat.set_target_temperature(30.0)
    thermostat.turn_off()
    assert thermostat.get_power_usage() == 0.0

    thermostat.turn_on()
    thermostat.set_mode("off")
    assert thermostat.is_on is True
    assert thermostat.get_power_usage() == 0.0


def test_power_usage_scales_with_temperature_gap(thermostat: Thermostat) -> None:
    thermostat.turn_on()
    readings = []
    for target in (20.0, 22.0, 25.0, 30.0):
        thermostat.set_target_temperature(target)
        readings.append(thermostat.get_power_usage())

    assert readings[0] == pytest.approx(500.0)
    assert readings[1] == pytest.approx(700.0)
    assert readings == sorted(readings)
    assert len(set(readings)) == len(readings)


def test_power_usage_is_symmetric_for_cooling(thermostat: Thermostat) -> None:
    thermostat.set_mode("cooling")
    thermostat.set_target_temperature(17.0)

    assert thermostat.get_power_usage() == pytest.approx(800.0)


def test_status_reports_temperatures_mode_and_watts(thermostat: Thermostat) -> None:
    thermostat.set_target_temperature(22.25)
    status = thermostat.get_status()

    assert "ON" in status
    assert "20.0C" in status
    assert "22.2C" in status or "22.3C" in status
    assert "heating" in status
    assert "1000 W" in status


def test_clone_resets_mode_and_keeps_temperatures(thermostat: Thermostat) -> None:
    thermostat.set_target_temperature(24.0)
    copy = thermostat.clone()

    assert copy.mode is ThermostatMode.OFF
    assert copy.is_on is False
    assert copy.current_temperature == 20.0
    assert copy.target_temperature == 24.0
