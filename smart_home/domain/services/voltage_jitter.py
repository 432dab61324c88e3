"""Domain service generating the simulated mains voltage perturbation."""

import math
import random
from typing import Optional

SINE_AMPLITUDE_V = 2.0
SINE_STEP = 0.1
NOISE_SCALE_V = 0.01


class SineVoltageJitter:
    """
    Periodic jitter with a small random component.

    offset(n) = sin(n * 0.1) * 2 + U[0, 1) / 100

    The result always lies in [-2.0, 2.01). Passing a seed makes the
    sequence reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    @property
    def bound(self) -> float:
        return SINE_AMPLITUDE_V + NOISE_SCALE_V

    def __call__(self, read_count: int) -> float:
        periodic = math.sin(read_count * SINE_STEP) * SINE_AMPLITUDE_V
        return periodic + self._rng.random() * NOISE_SCALE_V


def no_jitter(read_count: int) -> float:
    """Jitter function that keeps the reading at its nominal value."""
    return 0.0
