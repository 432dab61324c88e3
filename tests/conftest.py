from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from smart_home.domain.entities.light_bulb import LightBulb  # noqa: E402
from smart_home.domain.entities.registry import HomeRegistry  # noqa: E402
from smart_home.domain.entities.smart_outlet import SmartOutlet  # noqa: E402
from smart_home.domain.entities.thermostat import Thermostat  # noqa: E402
from smart_home.infrastructure.repositories import (  # noqa: E402
    InMemoryDeviceRepository,
)


class ManualClock:
    """IClock whose reading only moves when a test advances it."""

    def __init__(self, start: float = 1000.0) -> None:
        self.current = start

    def now(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


class RecordingJitter:
    """Jitter returning a fixed offset and remembering the counters it saw."""

    def __init__(self, offset: float = 0.5) -> None:
        self.offset = offset
        self.calls: List[int] = []

    def __call__(self, read_count: int) -> float:
        self.calls.append(read_count)
        return self.offset


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def registry(clock: ManualClock) -> HomeRegistry:
    return HomeRegistry(clock=clock)


@pytest.fixture()
def jitter() -> RecordingJitter:
    return RecordingJitter()


@pytest.fixture()
def device_repository() -> InMemoryDeviceRepository:
    return InMemoryDeviceRepository()


@pytest.fixture()
def lamp(registry: HomeRegistry) -> LightBulb:
    return LightBulb("LB1", "Lamp", 60, brightness=75, color="white", registry=registry)


@pytest.fixture()
def thermostat(registry: HomeRegistry) -> Thermostat:
    return Thermostat("TH1", "Bedroom thermostat", 1000, 20.0, registry=registry)


@pytest.fixture()
def outlet(registry: HomeRegistry, jitter: RecordingJitter) -> SmartOutlet:
    return SmartOutlet(
        "SO1", "Hallway outlet", 5, max_current=16, registry=registry, jitter=jitter
    )
