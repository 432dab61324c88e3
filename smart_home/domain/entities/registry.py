"""
Domain Entities - Home Registry

Run-scoped aggregates that every device reports into: how many devices
were created and how much energy all powered devices have consumed.
"""

from dataclasses import dataclass, field

from smart_home.domain.ports.clock import IClock
from smart_home.domain.services.clock import MonotonicClock
from smart_home.shared import get_logger

logger = get_logger(__name__)


@dataclass
class HomeRegistry:
    """Counters and time source shared by the devices of one simulation run."""

    clock: IClock = field(default_factory=MonotonicClock)
    total_devices_created: int = 0
    total_energy_consumed: float = 0.0

    def register_device(self, device_id: str) -> None:
        """Count a newly constructed device."""
        self.total_devices_created += 1
        logger.debug(
            "registry.device_registered",
            device_id=device_id,
            total_devices_created=self.total_devices_created,
        )

    def record_energy(self, device_id: str, watt_hours: float) -> None:
        """Add the energy of a finished on-session, in watt-hours."""
        self.total_energy_consumed += watt_hours
        logger.debug(
            "registry.energy_recorded",
            device_id=device_id,
            watt_hours=watt_hours,
            total_energy_consumed=self.total_energy_consumed,
        )

    def reset_energy_consumption(self) -> None:
        """Zero the aggregate energy; per-device accumulators are untouched."""
        logger.info(
            "registry.energy_reset", previous_total=self.total_energy_consumed
        )
        self.total_energy_consumed = 0.0

    def absorb(self, other: "HomeRegistry") -> None:
        """Add the counters of a finished sub-run to this registry."""
        self.total_devices_created += other.total_devices_created
        self.total_energy_consumed += other.total_energy_consumed
        logger.debug(
            "registry.absorbed",
            devices=other.total_devices_created,
            watt_hours=other.total_energy_consumed,
        )

    def get_total_devices_created(self) -> int:
        return self.total_devices_created

    def get_total_energy_consumed(self) -> float:
        return self.total_energy_consumed
