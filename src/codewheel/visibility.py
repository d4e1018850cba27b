"""Cross-ring visibility — which cells show through the outer cutouts.

Given the outer ring's section (12 slots, a cutout every 4th) and the
middle ring's section (24 slots), every cutout spans two middle
sections.  Each of those candidates is measured against the current
middle alignment; only every third offset lands on a printed cell, and
the offset band selects which row of the symbol grid that cell reads
from.

The constants (cutout start 2, cutout stride 4, visibility stride 3,
band width 6) describe the printed wheel and are treated as a data
contract: :class:`WheelGeometry` only checks that they are mutually
consistent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .angles import section_of
from .models import Ring, RingSpec, VisibleCell
from .overlay import Overlay, candidates_overlay
from .symbols import SymbolTable

logger = logging.getLogger(__name__)


class GeometryError(ValueError):
    """Ring geometry is inconsistent with the visibility rules."""


@dataclass(frozen=True)
class WheelGeometry:
    """Section counts and visibility constants of the printed wheel."""

    outer_sections: int = 12
    middle_sections: int = 24
    cutout_start: int = 2
    cutout_stride: int = 4
    visibility_stride: int = 3
    band_width: int = 6

    def __post_init__(self) -> None:
        for name in (
            "outer_sections",
            "middle_sections",
            "cutout_stride",
            "visibility_stride",
            "band_width",
        ):
            if getattr(self, name) < 1:
                raise GeometryError(f"{name} must be >= 1")
        if self.middle_sections % self.outer_sections:
            raise GeometryError(
                f"middle_sections ({self.middle_sections}) must be a multiple of "
                f"outer_sections ({self.outer_sections})"
            )
        if self.outer_sections % self.cutout_stride:
            raise GeometryError(
                f"cutout_stride ({self.cutout_stride}) must divide "
                f"outer_sections ({self.outer_sections})"
            )
        if self.middle_sections % self.visibility_stride:
            raise GeometryError(
                f"visibility_stride ({self.visibility_stride}) must divide "
                f"middle_sections ({self.middle_sections})"
            )
        if self.candidate_count % self.visibility_stride:
            raise GeometryError(
                f"{self.candidate_count} candidates cannot be split evenly by "
                f"visibility_stride ({self.visibility_stride})"
            )
        try:
            RingSpec(Ring.OUTER, self.outer_sections)
            RingSpec(Ring.MIDDLE, self.middle_sections)
        except ValueError as exc:
            raise GeometryError(str(exc)) from exc

    @property
    def outer_spec(self) -> RingSpec:
        return RingSpec(Ring.OUTER, self.outer_sections)

    @property
    def middle_spec(self) -> RingSpec:
        return RingSpec(Ring.MIDDLE, self.middle_sections)

    @property
    def cutout_count(self) -> int:
        return self.outer_sections // self.cutout_stride

    @property
    def span(self) -> int:
        """Middle sections covered by one outer section."""
        return self.middle_sections // self.outer_sections

    @property
    def candidate_count(self) -> int:
        return self.cutout_count * self.span

    @property
    def expected_visible(self) -> int:
        return self.candidate_count // self.visibility_stride

    @property
    def band_count(self) -> int:
        largest = (self.middle_sections - 1) // self.visibility_stride * self.visibility_stride
        return largest // self.band_width + 1

    @property
    def max_index(self) -> int:
        """Largest cell index the rules can produce."""
        return self.band_count * self.middle_sections


DEFAULT_GEOMETRY = WheelGeometry()


@dataclass(frozen=True)
class Candidate:
    """One middle section lying under a cutout."""

    cutout: int
    position: int
    middle_section: int
    offset: int
    visible: bool
    index: Optional[int] = None


@dataclass
class VisibilityResult:
    outer_section: int
    middle_section: int
    cells: List[VisibleCell] = field(default_factory=list)
    candidates: List[Candidate] = field(default_factory=list)
    overlay: Optional[Overlay] = None

    @property
    def indices(self) -> List[int]:
        return [cell.index for cell in self.cells]

    @property
    def codes(self) -> List[str]:
        return [cell.code for cell in self.cells]


# ── Rules ───────────────────────────────────────────────────────────

def cutout_sections(outer: int, geometry: WheelGeometry = DEFAULT_GEOMETRY) -> Tuple[int, ...]:
    """Outer sections that are open when the outer ring sits at *outer*."""
    return tuple(
        (outer + geometry.cutout_start + geometry.cutout_stride * k) % geometry.outer_sections
        for k in range(geometry.cutout_count)
    )


def candidate_sections(cutout: int, geometry: WheelGeometry = DEFAULT_GEOMETRY) -> Tuple[int, ...]:
    """Middle sections lying under outer section *cutout*."""
    return tuple(
        (cutout * geometry.span + i) % geometry.middle_sections
        for i in range(geometry.span)
    )


def visibility_offset(candidate: int, middle: int, geometry: WheelGeometry = DEFAULT_GEOMETRY) -> int:
    """Distance of *candidate* from the middle alignment, in [0, middle_sections)."""
    offset = candidate - middle
    if offset < 0:
        offset += geometry.middle_sections
    return offset % geometry.middle_sections


def is_visible(offset: int, geometry: WheelGeometry = DEFAULT_GEOMETRY) -> bool:
    return offset % geometry.visibility_stride == 0


def cell_index(offset: int, candidate: int, geometry: WheelGeometry = DEFAULT_GEOMETRY) -> int:
    """1-based cell number for a visible candidate."""
    return (offset // geometry.band_width) * geometry.middle_sections + candidate + 1


# ── Resolution ──────────────────────────────────────────────────────

def resolve_visible(
    outer: int,
    middle: int,
    symbols: SymbolTable,
    geometry: WheelGeometry = DEFAULT_GEOMETRY,
    debug: bool = False,
) -> VisibilityResult:
    """Return the cells exposed for the given ring sections.

    Cells are ordered by cutout, then by position within the cutout.
    An index outside *symbols* raises
    :class:`~codewheel.symbols.SymbolLookupError`; a visible count that
    differs from ``geometry.expected_visible`` raises
    :class:`GeometryError`.
    """
    outer %= geometry.outer_sections
    middle %= geometry.middle_sections
    result = VisibilityResult(outer_section=outer, middle_section=middle)

    for cutout in cutout_sections(outer, geometry):
        for position, candidate in enumerate(candidate_sections(cutout, geometry)):
            offset = visibility_offset(candidate, middle, geometry)
            visible = is_visible(offset, geometry)
            index = cell_index(offset, candidate, geometry) if visible else None
            result.candidates.append(
                Candidate(cutout, position, candidate, offset, visible, index)
            )
            if index is None:
                continue
            result.cells.append(
                VisibleCell(
                    index=index,
                    code=symbols.lookup(index),
                    cutout=cutout,
                    middle_section=candidate,
                    offset=offset,
                )
            )

    if len(result.cells) != geometry.expected_visible:
        raise GeometryError(
            f"{len(result.cells)} cells visible at outer={outer}, middle={middle}; "
            f"geometry expects {geometry.expected_visible}"
        )

    if debug:
        result.overlay = candidates_overlay(result.candidates, outer, geometry)

    return result


class VisibilityResolver:
    """Binds a symbol table to a geometry and resolves ring positions."""

    def __init__(
        self,
        symbols: SymbolTable,
        geometry: WheelGeometry = DEFAULT_GEOMETRY,
    ) -> None:
        if symbols.columns != geometry.middle_sections:
            raise GeometryError(
                f"Symbol table has {symbols.columns} columns but the middle ring "
                f"has {geometry.middle_sections} sections"
            )
        symbols.require(geometry.max_index)
        self.symbols = symbols
        self.geometry = geometry

    def resolve(self, outer: int, middle: int, debug: bool = False) -> VisibilityResult:
        return resolve_visible(outer, middle, self.symbols, self.geometry, debug=debug)

    def resolve_rotations(
        self,
        outer_rotation: float,
        middle_rotation: float,
        debug: bool = False,
    ) -> VisibilityResult:
        """Resolve from host-native ring rotations (degrees, CCW-positive)."""
        outer = section_of(outer_rotation, self.geometry.outer_spec)
        middle = section_of(middle_rotation, self.geometry.middle_spec)
        logger.debug("Rotations %.2f/%.2f -> sections %d/%d",
                     outer_rotation, middle_rotation, outer, middle)
        return self.resolve(outer, middle, debug=debug)
