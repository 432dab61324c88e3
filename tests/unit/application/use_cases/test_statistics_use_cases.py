from __future__ import annotations

import pytest

from smart_home.application.use_cases.statistics_use_cases import (
    GetEnergyStatisticsUseCase,
    ResetEnergyStatisticsUseCase,
)


def test_statistics_for_empty_run(device_repository, registry) -> None:
    stats = GetEnergyStatisticsUseCase(
        device_repository=device_repository, registry=registry
    ).execute()

    assert stats.total_devices_created == 0
    assert stats.stored_devices == 0
    assert stats.devices == []


def test_statistics_aggregate_devices(
    device_repository, registry, clock, lamp, thermostat, outlet
) -> None:
    for device in (lamp, thermostat, outlet):
        device_repository.add(device)
    lamp.turn_on()
    outlet.turn_on()
    clock.advance(3600)
    lamp.turn_off()

    stats = GetEnergyStatisticsUseCase(
        device_repository=device_repository, registry=registry
    ).execute()

    assert stats.total_devices_created == 3
    assert stats.stored_devices == 3
    assert stats.devices_on == 1
    assert stats.total_energy_consumed_wh == pytest.approx(60.0)
    assert stats.current_power_usage == pytest.approx(5.0)
    by_id = {entry.device_id: entry for entry in stats.devices}
    assert by_id["SO1"].energy_consumed_wh == pytest.approx(5.0)
    assert by_id["LB1"].on_time_hours == pytest.approx(1.0)


def test_reset_statistics(device_repository, registry, clock, lamp) -> None:
    device_repository.add(lamp)
    lamp.turn_on()
    clock.advance(60)
    lamp.turn_off()

    stats = ResetEnergyStatisticsUseCase(
        device_repository=device_repository, registry=registry
    ).execute()

    assert stats.total_energy_consumed_wh == 0.0
    assert stats.devices[0].energy_consumed_wh == pytest.approx(1.0)
