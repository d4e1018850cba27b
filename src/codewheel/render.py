from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from .models import Ring
from .overlay import Overlay, cells_overlay, cutout_overlay
from .visibility import cutout_sections
from .wheel import CodeWheel, WheelFrame

_RING_COLORS = {
    Ring.OUTER: "#3d5a80",
    Ring.MIDDLE: "#98c1d9",
    Ring.INNER: "#e0fbfc",
}
_CUTOUT_COLOR = "#f7f3e3"
_CODE_COLOR = "#293241"
_DEBUG_COLOR = "#ee6c4d"


def _ensure_mpl():
    """Lazy-import matplotlib; raise helpful error if missing."""
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle, Polygon
        return plt, Circle, Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc


def draw_wheel(ax, wheel: CodeWheel, frame: WheelFrame, show_debug: bool = False) -> None:
    """Draw rings, cutouts and exposed codes of *frame* onto *ax*."""
    _, Circle, Polygon = _ensure_mpl()
    cfg = wheel.config

    for ring, radius in ((Ring.OUTER, cfg.outer_radius),
                         (Ring.MIDDLE, cfg.middle_radius),
                         (Ring.INNER, cfg.inner_radius)):
        ax.add_patch(Circle((0.0, 0.0), radius, facecolor=_RING_COLORS[ring],
                            edgecolor=_CODE_COLOR, linewidth=1.0))

    outer_rotation = frame.rotations[Ring.OUTER]
    windows = cutout_overlay(
        cutout_sections(frame.outer_section, wheel.geometry),
        outer_rotation,
        wheel.geometry,
        cfg.middle_radius * 0.55,
        cfg.outer_radius * 0.98,
    )
    for region in windows.regions:
        ax.add_patch(Polygon(region.points, closed=True, facecolor=_CUTOUT_COLOR,
                             edgecolor=_CODE_COLOR, linewidth=0.8, zorder=2))

    labels = cells_overlay(frame.cells, outer_rotation, wheel.geometry,
                           (cfg.middle_radius + cfg.outer_radius) / 2.0)
    for point in labels.points:
        ax.text(point.x, point.y, point.label, ha="center", va="center",
                fontsize=10, fontweight="bold", color=_CODE_COLOR, zorder=4)

    if show_debug:
        draw_overlays(ax, frame.debug or wheel.debug_overlays())


def draw_overlays(ax, overlays: Iterable[Overlay], color: str = _DEBUG_COLOR) -> None:
    for overlay in overlays:
        for seg in overlay.segments:
            ax.plot([seg.start[0], seg.end[0]], [seg.start[1], seg.end[1]],
                    color=color, linewidth=0.8, zorder=3)
        for point in overlay.points:
            ax.plot(point.x, point.y, ".", ms=4, color=color, zorder=3)
            if point.label:
                ax.text(point.x, point.y, point.label, fontsize=6, color=color,
                        ha="left", va="bottom", zorder=3)


def render_png(
    wheel: CodeWheel,
    output_path: str | Path,
    frame: Optional[WheelFrame] = None,
    show_debug: bool = False,
    title: str = "",
    padding: float = 0.2,
    dpi: int = 150,
) -> Path:
    """Render the wheel to PNG.

    Without *frame* the wheel is ticked once to obtain the current state.
    Requires matplotlib; imported lazily to keep the core lightweight.
    """
    import matplotlib
    matplotlib.use("Agg")
    plt, _, _ = _ensure_mpl()
    if frame is None:
        frame = wheel.tick()

    fig, ax = plt.subplots(figsize=(6, 6))
    draw_wheel(ax, wheel, frame, show_debug=show_debug)

    extent = wheel.config.outer_radius + padding
    ax.set_aspect("equal", "box")
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.axis("off")
    if title:
        ax.set_title(title)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
    return output_path
