"""Default time source for the simulation."""

import time


class MonotonicClock:
    """IClock backed by ``time.monotonic``; immune to wall clock changes."""

    def now(self) -> float:
        return time.monotonic()
