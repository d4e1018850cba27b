from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Point = Tuple[float, float]


class Ring(Enum):
    INNER = "inner"
    MIDDLE = "middle"
    OUTER = "outer"


# Innermost first: the smallest disc sits on top.
HIT_ORDER: Tuple[Ring, ...] = (Ring.INNER, Ring.MIDDLE, Ring.OUTER)


@dataclass(frozen=True)
class RingSpec:
    """Angular layout of one rotating ring.

    *section_count* discrete slots evenly spaced around 360°; a ring
    pointing within half a section of a slot's nominal angle reports
    that slot.
    """

    ring: Ring
    section_count: int

    def __post_init__(self) -> None:
        if self.section_count < 1:
            raise ValueError("section_count must be >= 1")
        if 360 % self.section_count != 0:
            raise ValueError(
                f"section_count {self.section_count} does not divide 360 evenly"
            )

    @property
    def section_width(self) -> float:
        return 360.0 / self.section_count

    @property
    def half_offset(self) -> float:
        return self.section_width / 2.0


OUTER_SPEC = RingSpec(Ring.OUTER, 12)
MIDDLE_SPEC = RingSpec(Ring.MIDDLE, 24)


@dataclass(frozen=True)
class VisibleCell:
    """A numbered cell exposed through an outer cutout.

    *index* is the 1-based cell number, *code* the symbol looked up for
    it, *cutout* the outer section it shows through, *middle_section*
    the candidate middle section and *offset* that section's distance
    from the current middle alignment.
    """

    index: int
    code: str
    cutout: int
    middle_section: int
    offset: int


@dataclass(frozen=True)
class DragState:
    target: Ring
    initial_direction: Point
    initial_rotation: float


@dataclass(frozen=True)
class PointerEvent:
    action: "PointerAction"
    x: float = 0.0
    y: float = 0.0

    @property
    def point(self) -> Point:
        return (self.x, self.y)


class PointerAction(Enum):
    PRESS = "press"
    MOVE = "move"
    RELEASE = "release"

