"""Domain port for the time source used by powered devices."""

from __future__ import annotations

from typing import Protocol


class IClock(Protocol):
    """Monotonic time source measured in seconds."""

    def now(self) -> float:
        """Return the current reading in seconds."""
        ...
