from __future__ import annotations

from .angles import section_angle, section_of, shortest_delta
from .models import RingSpec


class SnapAnimator:
    """Eases a ring's rotation towards its nearest section.

    Each :meth:`step` closes a fixed fraction (*speed*) of the remaining
    angular distance, so the rotation approaches the target
    monotonically and never passes it.  Once the remainder drops below
    *tolerance* degrees the rotation lands exactly on the target.
    """

    def __init__(self, spec: RingSpec, speed: float = 0.2, tolerance: float = 0.01) -> None:
        if not 0.0 < speed <= 1.0:
            raise ValueError("speed must be in (0, 1]")
        if tolerance < 0.0:
            raise ValueError("tolerance must be >= 0")
        self.spec = spec
        self.speed = speed
        self.tolerance = tolerance

    def target(self, rotation: float) -> float:
        """Nominal rotation of the nearest section, on the same turn as *rotation*."""
        nominal = -section_angle(section_of(rotation, self.spec), self.spec)
        return rotation + shortest_delta(rotation, nominal)

    def remaining(self, rotation: float) -> float:
        return self.target(rotation) - rotation

    def step(self, rotation: float) -> float:
        target = self.target(rotation)
        remaining = target - rotation
        if abs(remaining) <= self.tolerance or self.speed == 1.0:
            return target
        return rotation + remaining * self.speed
