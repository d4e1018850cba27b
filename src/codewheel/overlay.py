"""Presentation geometry derived from ring state.

Each builder here is a plain function ``state → Overlay`` that computes
points, segments and regions in wheel-local coordinates without touching
the wheel itself, so overlays can be drawn, inspected in tests, or
dropped.

Angles follow the host convention: world angle 0 is the reference axis
and angles grow counter-clockwise.  Section slots are numbered clockwise
(see :func:`~codewheel.angles.normalize_angle`), so a ring resting on
section *o* has rotation ``-o * width`` and slot *e* sits at world angle
``-e * width``.  Cutout windows are cut into the outer ring: a window
reported as slot *e* while the ring is on section *o* lies
``(e - o) * width`` clockwise of the ring's rotation and turns with it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Tuple

import numpy as np

from .angles import section_of, section_rotation
from .models import RingSpec, VisibleCell

if TYPE_CHECKING:
    from .visibility import Candidate, WheelGeometry


# ═══════════════════════════════════════════════════════════════════
# Overlay data model
# ═══════════════════════════════════════════════════════════════════

@dataclass
class OverlayPoint:
    """A labelled point in wheel space."""
    id: str
    x: float
    y: float
    label: str = ""


@dataclass
class OverlaySegment:
    """A line segment between two points in wheel space."""
    id: str
    start: Tuple[float, float]
    end: Tuple[float, float]


@dataclass
class OverlayRegion:
    """A closed polygon (vertex positions, CCW)."""
    id: str
    points: List[Tuple[float, float]]


@dataclass
class Overlay:
    """Container for derived geometry that can be drawn over the wheel.

    *kind* identifies the builder (e.g. ``"sections"``).
    """
    kind: str
    points: List[OverlayPoint] = field(default_factory=list)
    segments: List[OverlaySegment] = field(default_factory=list)
    regions: List[OverlayRegion] = field(default_factory=list)
    metadata: Dict[str, object] = field(default_factory=dict)


def _polar(radius: float, angle_deg: float) -> Tuple[float, float]:
    theta = math.radians(angle_deg)
    return (radius * math.cos(theta), radius * math.sin(theta))


# ═══════════════════════════════════════════════════════════════════
# Section boundaries (debug lines)
# ═══════════════════════════════════════════════════════════════════

def section_boundary_overlay(
    spec: RingSpec,
    rotation: float,
    inner_radius: float,
    outer_radius: float,
) -> Overlay:
    """One radial segment per section boundary of a ring at *rotation*."""
    if outer_radius < inner_radius:
        raise ValueError("outer_radius must be >= inner_radius")

    width = spec.section_width
    # boundary k separates slot k from the clockwise slot k + 1
    angles = np.radians(rotation - width * np.arange(spec.section_count) - width / 2.0)
    cos, sin = np.cos(angles), np.sin(angles)

    overlay = Overlay(kind="sections", metadata={"ring": spec.ring.value, "rotation": rotation})
    for k in range(spec.section_count):
        overlay.segments.append(OverlaySegment(
            id=f"{spec.ring.value}_b{k}",
            start=(float(inner_radius * cos[k]), float(inner_radius * sin[k])),
            end=(float(outer_radius * cos[k]), float(outer_radius * sin[k])),
        ))
    return overlay


# ═══════════════════════════════════════════════════════════════════
# Cutout windows
# ═══════════════════════════════════════════════════════════════════

def cutout_angle(cutout: int, outer_rotation: float, geometry: "WheelGeometry") -> float:
    """World angle of the centre of cutout window *cutout*.

    *cutout* is the slot the window covers while the outer ring rests on
    ``section_of(outer_rotation)``; the window keeps its place on the
    ring, so the angle follows *outer_rotation* continuously.
    """
    spec = geometry.outer_spec
    outer_section = section_of(outer_rotation, spec)
    steps = (cutout - outer_section) % spec.section_count
    return outer_rotation - steps * spec.section_width


def cutout_overlay(
    cutouts: Iterable[int],
    outer_rotation: float,
    geometry: "WheelGeometry",
    inner_radius: float,
    outer_radius: float,
    resolution: int = 8,
) -> Overlay:
    """Annular wedge polygons for the open outer sections."""
    width = geometry.outer_spec.section_width
    overlay = Overlay(kind="cutouts", metadata={"rotation": outer_rotation})
    for cutout in cutouts:
        centre = cutout_angle(cutout, outer_rotation, geometry)
        arc = np.linspace(centre - width / 2.0, centre + width / 2.0, resolution + 1)
        outer_arc = [_polar(outer_radius, a) for a in arc]
        inner_arc = [_polar(inner_radius, a) for a in arc[::-1]]
        overlay.regions.append(OverlayRegion(
            id=f"cutout_{cutout}",
            points=outer_arc + inner_arc,
        ))
    return overlay


# ═══════════════════════════════════════════════════════════════════
# Exposed cells
# ═══════════════════════════════════════════════════════════════════

def _candidate_angle(
    cutout: int,
    position: int,
    outer_rotation: float,
    geometry: "WheelGeometry",
) -> float:
    # later positions are the higher-numbered, more clockwise slots
    spread = (position - (geometry.span - 1) / 2.0) * geometry.middle_spec.section_width
    return cutout_angle(cutout, outer_rotation, geometry) - spread


def cells_overlay(
    cells: Iterable[VisibleCell],
    outer_rotation: float,
    geometry: "WheelGeometry",
    radius: float,
) -> Overlay:
    """Labelled points for exposed cells, placed in their cutout windows."""
    overlay = Overlay(kind="cells")
    for cell in cells:
        position = (cell.middle_section - cell.cutout * geometry.span) % geometry.middle_sections
        x, y = _polar(radius, _candidate_angle(cell.cutout, position, outer_rotation, geometry))
        overlay.points.append(OverlayPoint(
            id=f"cell_{cell.index}",
            x=x, y=y,
            label=cell.code,
        ))
    return overlay


def candidates_overlay(
    candidates: Iterable["Candidate"],
    outer_section: int,
    geometry: "WheelGeometry",
    radius: float = 1.0,
) -> Overlay:
    """Every middle section under a cutout, labelled with its offset.

    The outer ring is assumed to rest on *outer_section*.
    """
    outer_rotation = section_rotation(outer_section, geometry.outer_spec)
    overlay = Overlay(kind="candidates", metadata={"outer_section": outer_section})
    for cand in candidates:
        x, y = _polar(radius, _candidate_angle(cand.cutout, cand.position, outer_rotation, geometry))
        mark = "*" if cand.visible else ""
        overlay.points.append(OverlayPoint(
            id=f"cand_{cand.cutout}_{cand.position}",
            x=x, y=y,
            label=f"{cand.middle_section}:{cand.offset}{mark}",
        ))
    return overlay
