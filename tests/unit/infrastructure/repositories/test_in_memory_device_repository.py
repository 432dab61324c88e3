from __future__ import annotations

from smart_home.domain.entities.light_bulb import LightBulb
from smart_home.infrastructure.repositories import InMemoryDeviceRepository


def test_add_and_find(device_repository: InMemoryDeviceRepository, lamp) -> None:
    device_repository.add(lamp)

    assert device_repository.find_by_id("LB1") is lamp
    assert device_repository.find_by_id("missing") is None
    assert len(device_repository) == 1


def test_find_all_keeps_insertion_order(
    device_repository: InMemoryDeviceRepository, lamp, thermostat, outlet
) -> None:
    for device in (outlet, lamp, thermostat):
        device_repository.add(device)

    assert [d.device_id for d in device_repository.find_all()] == ["SO1", "LB1", "TH1"]


def test_add_with_existing_id_replaces(
    device_repository: InMemoryDeviceRepository, lamp, registry
) -> None:
    device_repository.add(lamp)
    replacement = LightBulb("LB1", "Other lamp", 40, registry=registry)

    device_repository.add(replacement)

    assert device_repository.find_by_id("LB1") is replacement
    assert len(device_repository) == 1


def test_delete(device_repository: InMemoryDeviceRepository, lamp) -> None:
    device_repository.add(lamp)

    assert device_repository.delete("LB1") is True
    assert device_repository.delete("LB1") is False
    assert device_repository.find_all() == []
