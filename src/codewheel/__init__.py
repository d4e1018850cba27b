"""codewheel — three-ring rotary cipher wheel logic.

Public API is organised into layers:

- **Core** — ring models, angle normalization and section quantization
- **Visibility** — cutouts, candidate sections and cell lookup
- **Interaction** — drag state machine, snap easing, viewport scaling
- **Wheel** — configuration, symbol tables and the per-frame loop
- **Rendering** — debug overlays and matplotlib output (requires matplotlib)
- **Diagnostics** — visibility over the whole section space
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    Ring,
    RingSpec,
    VisibleCell,
    DragState,
    PointerAction,
    PointerEvent,
    HIT_ORDER,
    OUTER_SPEC,
    MIDDLE_SPEC,
)
from .angles import (
    normalize_angle,
    denormalize_angle,
    quantize_section,
    section_of,
    section_angle,
    section_rotation,
    shortest_delta,
)

# ── Visibility ──────────────────────────────────────────────────────
from .symbols import SymbolTable, SymbolLookupError
from .visibility import (
    GeometryError,
    WheelGeometry,
    DEFAULT_GEOMETRY,
    VisibilityResult,
    VisibilityResolver,
    cutout_sections,
    candidate_sections,
    visibility_offset,
    cell_index,
    resolve_visible,
)

# ── Interaction ─────────────────────────────────────────────────────
from .drag import DragController, DragPhase, concentric_hit_test
from .snap import SnapAnimator
from .viewport import ViewportScaler, ViewportPoller, fit_scale, view_bounds

# ── Wheel ───────────────────────────────────────────────────────────
from .config import WheelConfig, DEFAULT_CONFIG, FREE_INNER, INSTANT_SNAP
from .io import load_symbols, save_symbols, load_config, save_config
from .wheel import CodeWheel, WheelFrame
from .logging_config import level_for, setup_logging

# ── Rendering ───────────────────────────────────────────────────────
from .overlay import (
    Overlay,
    OverlayPoint,
    OverlaySegment,
    OverlayRegion,
    section_boundary_overlay,
    cutout_angle,
    cutout_overlay,
    cells_overlay,
)
from .render import render_png

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import visibility_table, cell_coverage, diagnostics_report

__all__ = [
    # Core
    "Ring",
    "RingSpec",
    "VisibleCell",
    "DragState",
    "PointerAction",
    "PointerEvent",
    "HIT_ORDER",
    "OUTER_SPEC",
    "MIDDLE_SPEC",
    "normalize_angle",
    "denormalize_angle",
    "quantize_section",
    "section_of",
    "section_angle",
    "section_rotation",
    "shortest_delta",
    # Visibility
    "SymbolTable",
    "SymbolLookupError",
    "GeometryError",
    "WheelGeometry",
    "DEFAULT_GEOMETRY",
    "VisibilityResult",
    "VisibilityResolver",
    "cutout_sections",
    "candidate_sections",
    "visibility_offset",
    "cell_index",
    "resolve_visible",
    # Interaction
    "DragController",
    "DragPhase",
    "concentric_hit_test",
    "SnapAnimator",
    "ViewportScaler",
    "ViewportPoller",
    "fit_scale",
    "view_bounds",
    # Wheel
    "WheelConfig",
    "DEFAULT_CONFIG",
    "FREE_INNER",
    "INSTANT_SNAP",
    "load_symbols",
    "save_symbols",
    "load_config",
    "save_config",
    "CodeWheel",
    "WheelFrame",
    "setup_logging",
    "level_for",
    # Rendering
    "Overlay",
    "OverlayPoint",
    "OverlaySegment",
    "OverlayRegion",
    "section_boundary_overlay",
    "cutout_angle",
    "cutout_overlay",
    "cells_overlay",
    "render_png",
    # Diagnostics
    "visibility_table",
    "cell_coverage",
    "diagnostics_report",
]
