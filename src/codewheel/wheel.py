"""CodeWheel — ring state plus the per-frame update loop.

One call to :meth:`CodeWheel.tick` runs a whole frame in a fixed order:

1. the view size is polled (when a size provider is given) and queued
   pointer events drive the :class:`~codewheel.drag.DragController`;
2. every ring that is not being dragged eases towards its nearest section;
3. rotations are quantized into sections;
4. the visible cells are resolved;
5. the resulting :class:`WheelFrame` goes to the presentation sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional

from .angles import section_of, section_rotation
from .config import DEFAULT_CONFIG, WheelConfig
from .drag import DragController, HitTest, concentric_hit_test
from .models import PointerEvent, Ring, VisibleCell
from .overlay import Overlay, section_boundary_overlay
from .snap import SnapAnimator
from .symbols import SymbolTable
from .viewport import Size, ViewportPoller, ViewportScaler
from .visibility import DEFAULT_GEOMETRY, VisibilityResolver, WheelGeometry

logger = logging.getLogger(__name__)


@dataclass
class WheelFrame:
    """Everything the presentation layer needs for one frame."""

    rotations: Dict[Ring, float]
    outer_section: int
    middle_section: int
    cells: List[VisibleCell]
    dragging: Optional[Ring] = None
    debug: List[Overlay] = field(default_factory=list)

    @property
    def indices(self) -> List[int]:
        return [cell.index for cell in self.cells]

    @property
    def codes(self) -> List[str]:
        return [cell.code for cell in self.cells]


FrameSink = Callable[[WheelFrame], None]


class CodeWheel:
    """Three concentric rings, their drag/snap behaviour and visibility.

    *symbols* defaults to a table whose codes are the cell numbers.
    *hit_test* defaults to nested discs sized by the config radii.
    Hosts without resize notifications pass *size_provider*; the view
    size is then polled every ``config.poll_interval`` seconds from
    :meth:`tick`.
    """

    def __init__(
        self,
        symbols: Optional[SymbolTable] = None,
        config: WheelConfig = DEFAULT_CONFIG,
        geometry: WheelGeometry = DEFAULT_GEOMETRY,
        hit_test: Optional[HitTest] = None,
        sink: Optional[FrameSink] = None,
        size_provider: Optional[Callable[[], Size]] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        errors = config.validate()
        if errors:
            raise ValueError("Invalid wheel config: " + "; ".join(errors))
        if symbols is None:
            symbols = SymbolTable.numbered(geometry.band_count, geometry.middle_sections)

        self.config = config
        self.geometry = geometry
        self.resolver = VisibilityResolver(symbols, geometry)
        self.sink = sink
        self._rotations: Dict[Ring, float] = {ring: 0.0 for ring in Ring}
        self._pending: List[PointerEvent] = []

        self.drag = DragController(
            hit_test or concentric_hit_test(config.radii),
            self,
            movable=config.movable_rings,
        )
        self.animators: Dict[Ring, SnapAnimator] = {
            Ring.OUTER: SnapAnimator(geometry.outer_spec, config.snap_speed, config.snap_tolerance),
            Ring.MIDDLE: SnapAnimator(geometry.middle_spec, config.snap_speed, config.snap_tolerance),
        }
        self.scaler = ViewportScaler((config.content_width, config.content_height))
        self.poller: Optional[ViewportPoller] = None
        if size_provider is not None:
            self.poller = ViewportPoller(
                self.scaler, size_provider, interval=config.poll_interval, clock=clock,
            )

    @property
    def symbols(self) -> SymbolTable:
        return self.resolver.symbols

    # ── rotation source / sink ──────────────────────────────────────

    def get_rotation(self, ring: Ring) -> float:
        return self._rotations[ring]

    def set_rotation(self, ring: Ring, rotation: float) -> None:
        self._rotations[ring] = float(rotation)

    def set_sections(self, outer: int, middle: int) -> None:
        """Place the outer and middle rings exactly on the given sections."""
        self.set_rotation(Ring.OUTER, section_rotation(outer, self.geometry.outer_spec))
        self.set_rotation(Ring.MIDDLE, section_rotation(middle, self.geometry.middle_spec))

    def sections(self) -> tuple[int, int]:
        return (
            section_of(self._rotations[Ring.OUTER], self.geometry.outer_spec),
            section_of(self._rotations[Ring.MIDDLE], self.geometry.middle_spec),
        )

    # ── input ───────────────────────────────────────────────────────

    def push(self, event: PointerEvent) -> None:
        """Queue a pointer event for the next :meth:`tick`."""
        self._pending.append(event)

    # ── frame loop ──────────────────────────────────────────────────

    def tick(self, events: Iterable[PointerEvent] = ()) -> WheelFrame:
        if self.poller is not None:
            self.poller.poll()

        pending, self._pending = self._pending, []
        for event in [*pending, *events]:
            self.drag.handle(event)

        target = self.drag.target
        for ring, animator in self.animators.items():
            if ring is target:
                continue
            self._rotations[ring] = animator.step(self._rotations[ring])

        result = self.resolver.resolve_rotations(
            self._rotations[Ring.OUTER],
            self._rotations[Ring.MIDDLE],
            debug=self.config.debug,
        )
        frame = WheelFrame(
            rotations=dict(self._rotations),
            outer_section=result.outer_section,
            middle_section=result.middle_section,
            cells=result.cells,
            dragging=target,
        )
        if self.config.debug:
            frame.debug = self.debug_overlays()
            if result.overlay is not None:
                frame.debug.append(result.overlay)

        if self.sink is not None:
            self.sink(frame)
        return frame

    def settle(self, max_ticks: int = 1000) -> WheelFrame:
        """Tick until no ring moves any more (or *max_ticks* is reached)."""
        frame = self.tick()
        for _ in range(max_ticks):
            before = dict(self._rotations)
            frame = self.tick()
            if before == self._rotations:
                break
        return frame

    def debug_overlays(self) -> List[Overlay]:
        cfg = self.config
        return [
            section_boundary_overlay(
                self.geometry.outer_spec, self._rotations[Ring.OUTER],
                cfg.middle_radius, cfg.outer_radius,
            ),
            section_boundary_overlay(
                self.geometry.middle_spec, self._rotations[Ring.MIDDLE],
                cfg.inner_radius, cfg.middle_radius,
            ),
        ]
