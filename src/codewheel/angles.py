"""Angle conventions and section quantization.

The host reports ring rotations counter-clockwise-positive from a fixed
reference axis.  Section numbering on the wheel runs clockwise, so every
raw angle goes through :func:`normalize_angle` before it is quantized.
"""

from __future__ import annotations

import math

from .models import Point, RingSpec


def normalize_angle(raw: float) -> float:
    """Convert a host angle (CCW-positive) into a clockwise angle in [0, 360)."""
    norm = (360.0 - raw) % 360.0
    # (-tiny) % 360.0 rounds to 360.0
    if norm >= 360.0:
        norm = 0.0
    return norm


def denormalize_angle(norm: float) -> float:
    """Inverse of :func:`normalize_angle`, returning a host angle in [0, 360)."""
    return normalize_angle(norm)


def quantize_section(norm: float, spec: RingSpec) -> int:
    """Return the section nearest to the clockwise angle *norm*.

    Half a section width is added before flooring so that each section
    owns ``[nominal - half, nominal + half)``.
    """
    width = spec.section_width
    return int(math.floor((norm + spec.half_offset) / width)) % spec.section_count


def section_of(raw: float, spec: RingSpec) -> int:
    """Section index for a host-native rotation."""
    return quantize_section(normalize_angle(raw), spec)


def section_angle(section: int, spec: RingSpec) -> float:
    """Nominal clockwise angle of *section*."""
    return (section % spec.section_count) * spec.section_width


def section_rotation(section: int, spec: RingSpec) -> float:
    """Host-native rotation that puts *section* at the reference axis."""
    return denormalize_angle(section_angle(section, spec))


def shortest_delta(source: float, target: float) -> float:
    """Signed angle in (-180, 180] that turns *source* onto *target*."""
    delta = (target - source) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def direction_of(point: Point) -> Point:
    """Unit vector towards *point*; the zero vector stays zero."""
    x, y = point
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0)
    return (x / length, y / length)


def rotation_between(a: Point, b: Point) -> float:
    """Signed angle in degrees of the shortest rotation taking *a* onto *b*.

    Either vector being zero gives 0.
    """
    ax, ay = a
    bx, by = b
    if (ax == 0.0 and ay == 0.0) or (bx == 0.0 and by == 0.0):
        return 0.0
    cross = ax * by - ay * bx
    dot = ax * bx + ay * by
    return math.degrees(math.atan2(cross, dot))
