"""Interactive matplotlib front-end for a :class:`~codewheel.wheel.CodeWheel`.

The figure's mouse events become pointer events, its resize events drive
the viewport scaler, and a canvas timer runs one wheel frame per tick.
Axis limits always span the view in wheel-local units, so event data
coordinates are already wheel-local.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .models import Point, PointerAction, PointerEvent
from .render import _ensure_mpl, draw_wheel
from .wheel import CodeWheel, WheelFrame

logger = logging.getLogger(__name__)

_LEFT_BUTTON = 1


class WheelViewer:
    def __init__(self, wheel: CodeWheel, fig=None, ax=None, show_debug: Optional[bool] = None) -> None:
        plt, _, _ = _ensure_mpl()
        if fig is None:
            fig, ax = plt.subplots(figsize=(6, 6))
        elif ax is None:
            ax = fig.gca()
        self.wheel = wheel
        self.fig = fig
        self.ax = ax
        self.show_debug = wheel.config.debug if show_debug is None else show_debug
        self.frame: Optional[WheelFrame] = None

        canvas = fig.canvas
        self._cids: List[int] = [
            canvas.mpl_connect("button_press_event", self.on_press),
            canvas.mpl_connect("motion_notify_event", self.on_move),
            canvas.mpl_connect("button_release_event", self.on_release),
            canvas.mpl_connect("resize_event", self.on_resize),
        ]
        self.timer = canvas.new_timer(interval=wheel.config.frame_interval_ms)
        self.timer.add_callback(self.step)

        width, height = canvas.get_width_height()
        wheel.scaler.on_resize(width, height)

    # ── event handlers ──────────────────────────────────────────────

    def _local_point(self, event) -> Optional[Point]:
        if event.inaxes is not self.ax or event.xdata is None or event.ydata is None:
            return None
        return (float(event.xdata), float(event.ydata))

    def on_press(self, event) -> None:
        if event.button != _LEFT_BUTTON:
            return
        point = self._local_point(event)
        if point is not None:
            self.wheel.push(PointerEvent(PointerAction.PRESS, *point))

    def on_move(self, event) -> None:
        point = self._local_point(event)
        if point is not None:
            self.wheel.push(PointerEvent(PointerAction.MOVE, *point))

    def on_release(self, event) -> None:
        if event.button != _LEFT_BUTTON:
            return
        self.wheel.push(PointerEvent(PointerAction.RELEASE))

    def on_resize(self, event) -> None:
        if event.width > 0 and event.height > 0:
            self.wheel.scaler.on_resize(event.width, event.height)

    # ── frame loop ──────────────────────────────────────────────────

    def step(self) -> WheelFrame:
        self.frame = self.wheel.tick()
        self.redraw()
        return self.frame

    def redraw(self) -> None:
        if self.frame is None:
            return
        ax = self.ax
        ax.clear()
        draw_wheel(ax, self.wheel, self.frame, show_debug=self.show_debug)
        half_w, half_h = self._half_extent()
        ax.set_xlim(-half_w, half_w)
        ax.set_ylim(-half_h, half_h)
        ax.set_aspect("equal", "box")
        ax.axis("off")
        ax.set_title("  ".join(self.frame.codes))
        self.fig.canvas.draw_idle()

    def _half_extent(self) -> tuple[float, float]:
        scaler = self.wheel.scaler
        if scaler.view_size is None:
            return (scaler.content_size[0] / 2.0, scaler.content_size[1] / 2.0)
        return (
            scaler.view_size[0] / scaler.scale / 2.0,
            scaler.view_size[1] / scaler.scale / 2.0,
        )

    def show(self) -> None:
        plt, _, _ = _ensure_mpl()
        self.step()
        self.timer.start()
        logger.info("Viewer running (frame every %d ms)", self.wheel.config.frame_interval_ms)
        plt.show()

    def close(self) -> None:
        plt, _, _ = _ensure_mpl()
        self.timer.stop()
        for cid in self._cids:
            self.fig.canvas.mpl_disconnect(cid)
        self._cids.clear()
        plt.close(self.fig)
