"""Screen-fit scaling of the whole wheel assembly.

The wheel is scaled uniformly so that its content box fits the current
view.  Hosts that can push resize notifications call
:meth:`ViewportScaler.on_resize`; hosts that can only be polled wrap a
size provider in :class:`ViewportPoller` with an explicit interval.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

Size = Tuple[float, float]


def fit_scale(view_width: float, view_height: float, content_width: float, content_height: float) -> float:
    """Largest uniform scale at which the content fits inside the view."""
    if content_width <= 0 or content_height <= 0:
        raise ValueError("content dimensions must be positive")
    if view_width <= 0 or view_height <= 0:
        raise ValueError("view dimensions must be positive")
    return min(view_width / content_width, view_height / content_height)


@dataclass(frozen=True)
class ViewBounds:
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def size(self) -> Size:
        return (self.width, self.height)


def view_bounds(camera: Tuple[float, float], corner: Tuple[float, float]) -> ViewBounds:
    """Visible world rectangle of a camera centred at *camera*.

    *corner* is the world position of the top-right screen corner; the
    view extends symmetrically around the camera.
    """
    cx, cy = camera
    dx, dy = abs(corner[0] - cx), abs(corner[1] - cy)
    return ViewBounds(cx - dx, cy - dy, cx + dx, cy + dy)


class ViewportScaler:
    """Recomputes the fit scale when, and only when, the view size changes."""

    def __init__(
        self,
        content_size: Size,
        on_change: Optional[Callable[[float], None]] = None,
    ) -> None:
        if content_size[0] <= 0 or content_size[1] <= 0:
            raise ValueError("content dimensions must be positive")
        self.content_size = content_size
        self.on_change = on_change
        self.view_size: Optional[Size] = None
        self.scale: float = 1.0

    def on_resize(self, width: float, height: float) -> bool:
        """Accept a new view size; return whether the scale was recomputed."""
        if self.view_size == (width, height):
            return False
        self.scale = fit_scale(width, height, *self.content_size)
        self.view_size = (width, height)
        logger.info("View %.0fx%.0f -> scale %.4f", width, height, self.scale)
        if self.on_change is not None:
            self.on_change(self.scale)
        return True


class ViewportPoller:
    """Polls a size provider at most once per *interval* seconds.

    Meant to be driven from the host's frame tick; it never blocks and
    never spawns a thread.
    """

    def __init__(
        self,
        scaler: ViewportScaler,
        size_provider: Callable[[], Size],
        interval: float = 0.2,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.scaler = scaler
        self.size_provider = size_provider
        self.interval = interval
        self.clock = clock or time.monotonic
        self._last_check: Optional[float] = None

    def poll(self) -> bool:
        """Check the view size if the interval has elapsed; return whether the scale changed."""
        now = self.clock()
        if self._last_check is not None and now - self._last_check < self.interval:
            return False
        self._last_check = now
        width, height = self.size_provider()
        return self.scaler.on_resize(width, height)
