"""Pointer drag state machine.

A press over a movable ring captures that ring's rotation and the
pointer's direction from the wheel centre.  While the pointer is held,
the ring turns rigidly with the pointer's angular movement around the
centre; releasing leaves the ring where it is.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Protocol

from .angles import direction_of, rotation_between
from .models import HIT_ORDER, DragState, Point, PointerAction, PointerEvent, Ring

logger = logging.getLogger(__name__)

HitTest = Callable[[Ring, Point], bool]


class RotationStore(Protocol):
    """Anything that can read and write ring rotations (host degrees)."""

    def get_rotation(self, ring: Ring) -> float:
        ...

    def set_rotation(self, ring: Ring, rotation: float) -> None:
        ...


class DragPhase(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


def concentric_hit_test(radii: Dict[Ring, float]) -> HitTest:
    """Hit test for nested discs centred on the wheel origin.

    A point hits a ring when it lies within that ring's radius; with
    :data:`~codewheel.models.HIT_ORDER` the smallest disc wins.
    """
    def hit(ring: Ring, point: Point) -> bool:
        radius = radii.get(ring)
        if radius is None:
            return False
        return math.hypot(point[0], point[1]) <= radius

    return hit


class DragController:
    """Turns press / move / release into rotations of a single ring.

    Illegal transitions (release while idle, press while dragging, move
    while idle) are no-ops.
    """

    def __init__(
        self,
        hit_test: HitTest,
        rotations: RotationStore,
        movable: Iterable[Ring] = (Ring.MIDDLE, Ring.OUTER),
    ) -> None:
        self.hit_test = hit_test
        self.rotations = rotations
        self.movable: FrozenSet[Ring] = frozenset(movable)
        self._state: Optional[DragState] = None

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self._state is None else DragPhase.DRAGGING

    @property
    def state(self) -> Optional[DragState]:
        return self._state

    @property
    def target(self) -> Optional[Ring]:
        return None if self._state is None else self._state.target

    def ring_at(self, point: Point) -> Optional[Ring]:
        """Topmost ring under *point*, movable or not."""
        for ring in HIT_ORDER:
            if self.hit_test(ring, point):
                return ring
        return None

    def press(self, point: Point) -> bool:
        """Start dragging the ring under *point*; return whether a drag began."""
        if self._state is not None:
            logger.debug("Press ignored: already dragging %s", self._state.target.value)
            return False

        ring = self.ring_at(point)
        if ring is None:
            return False
        if ring not in self.movable:
            logger.debug("Press on locked ring %s ignored", ring.value)
            return False

        self._state = DragState(
            target=ring,
            initial_direction=direction_of(point),
            initial_rotation=self.rotations.get_rotation(ring),
        )
        logger.debug("Drag started on %s at %.2f°", ring.value, self._state.initial_rotation)
        return True

    def move(self, point: Point) -> None:
        state = self._state
        if state is None:
            return
        delta = rotation_between(state.initial_direction, direction_of(point))
        self.rotations.set_rotation(state.target, state.initial_rotation + delta)

    def release(self) -> None:
        if self._state is None:
            logger.debug("Release without press ignored")
            return
        logger.debug("Drag on %s ended", self._state.target.value)
        self._state = None

    def handle(self, event: PointerEvent) -> None:
        if event.action is PointerAction.PRESS:
            self.press(event.point)
        elif event.action is PointerAction.MOVE:
            self.move(event.point)
        elif event.action is PointerAction.RELEASE:
            self.release()
