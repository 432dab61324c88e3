from __future__ import annotations

import pytest

from smart_home.domain.entities.device import PoweredDevice
from smart_home.domain.entities.smart_outlet import SENSOR_TYPE, SmartOutlet
from smart_home.domain.ports.sensor import ISensor


def test_outlet_defaults(outlet: SmartOutlet) -> None:
    assert outlet.outlet_on is False
    assert outlet.voltage == 220.0
    assert outlet.max_current == 16.0
    assert outlet.read_count == 0


def test_turn_on_engages_and_turn_off_disengages(outlet: SmartOutlet) -> None:
    outlet.turn_on()
    assert outlet.outlet_on is True

    outlet.turn_off()
    assert outlet.outlet_on is False


def test_toggle_is_ignored_while_device_is_off(outlet: SmartOutlet) -> None:
    assert outlet.toggle_outlet() is False
    assert outlet.outlet_on is False


def test_toggle_flips_while_device_is_on(outlet: SmartOutlet) -> None:
    outlet.turn_on()

    assert outlet.toggle_outlet() is False
    assert outlet.toggle_outlet() is True


def test_turn_on_while_on_keeps_disengaged_outlet(outlet: SmartOutlet) -> None:
    outlet.turn_on()
    outlet.toggle_outlet()

    outlet.turn_on()

    assert outlet.outlet_on is False
    assert outlet.get_power_usage() == 0.0


@pytest.mark.parametrize(
    "device_on, engaged, expected",
    [
        (False, False, 0.0),
        (True, False, 0.0),
        (True, True, 5.0),
    ],
)
def test_power_usage_requires_device_and_outlet_on(
    outlet: SmartOutlet, device_on, engaged, expected
) -> None:
    if device_on:
        outlet.turn_on()
        if not engaged:
            outlet.toggle_outlet()

    assert outlet.get_power_usage() == expected
    assert outlet.get_current_power() == expected


def test_voltage_reading_uses_jitter_and_counts_reads(outlet: SmartOutlet, jitter) -> None:
    first = outlet.get_current_voltage()
    second = outlet.get_current_voltage()

    assert first == pytest.approx(220.5)
    assert second == pytest.approx(220.5)
    assert jitter.calls == [0, 1]
    assert outlet.read_count == 2


def test_default_jitter_stays_near_nominal(registry) -> None:
    outlet = SmartOutlet("SO2", "Default jitter", 5, registry=registry)

    readings = [outlet.get_current_voltage() for _ in range(200)]

    assert all(abs(reading - 220.0) <= 2.01 for reading in readings)
    assert len(set(readings)) > 1


def test_outlet_satisfies_sensor_capability(outlet: SmartOutlet) -> None:
    assert isinstance(outlet, ISensor)
    assert isinstance(outlet, PoweredDevice)
    assert outlet.get_sensor_type() == SENSOR_TYPE


def test_status_reports_outlet_state(outlet: SmartOutlet) -> None:
    outlet.turn_on()
    status = outlet.get_status()

    assert "ON" in status
    assert "active" in status
    assert "16 A" in status
    assert "5 W" in status

    outlet.toggle_outlet()
    assert "inactive" in outlet.get_status()


def test_clone_keeps_sensor_configuration(outlet: SmartOutlet, jitter) -> None:
    outlet.turn_on()
    copy = outlet.clone()

    assert copy.max_current == outlet.max_current
    assert copy.voltage == outlet.voltage
    assert copy.outlet_on is False
    copy.get_current_voltage()
    assert jitter.calls == [0]
