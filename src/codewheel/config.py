"""Wheel configuration and presets."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List

from .models import Ring


@dataclass(frozen=True)
class WheelConfig:
    """Tunable behaviour and layout of a code wheel.

    Radii and content size are in wheel-local units; the viewport scale
    maps them onto the screen.
    """

    snap_speed: float = 0.2
    snap_tolerance: float = 0.01
    allow_moving_inner: bool = False
    inner_radius: float = 1.0
    middle_radius: float = 2.0
    outer_radius: float = 3.0
    content_width: float = 6.0
    content_height: float = 6.0
    poll_interval: float = 0.2
    frame_interval_ms: int = 33
    debug: bool = False

    def validate(self) -> List[str]:
        errors: List[str] = []
        if not 0.0 < self.snap_speed <= 1.0:
            errors.append(f"snap_speed must be in (0, 1], got {self.snap_speed}")
        if self.snap_tolerance < 0.0:
            errors.append("snap_tolerance must be >= 0")
        if not 0.0 < self.inner_radius < self.middle_radius < self.outer_radius:
            errors.append("radii must satisfy 0 < inner < middle < outer")
        if self.content_width <= 0 or self.content_height <= 0:
            errors.append("content size must be positive")
        if self.poll_interval <= 0:
            errors.append("poll_interval must be positive")
        if self.frame_interval_ms < 1:
            errors.append("frame_interval_ms must be >= 1")
        return errors

    @property
    def radii(self) -> Dict[Ring, float]:
        return {
            Ring.INNER: self.inner_radius,
            Ring.MIDDLE: self.middle_radius,
            Ring.OUTER: self.outer_radius,
        }

    @property
    def movable_rings(self) -> tuple[Ring, ...]:
        if self.allow_moving_inner:
            return (Ring.INNER, Ring.MIDDLE, Ring.OUTER)
        return (Ring.MIDDLE, Ring.OUTER)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WheelConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise KeyError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


# ── Presets ─────────────────────────────────────────────────────────

DEFAULT_CONFIG = WheelConfig()

FREE_INNER = replace(DEFAULT_CONFIG, allow_moving_inner=True)

INSTANT_SNAP = replace(DEFAULT_CONFIG, snap_speed=1.0)
