"""Tests for the interactive viewer, driven with synthetic canvas events."""

from types import SimpleNamespace

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from codewheel.models import Ring
from codewheel.viewer import WheelViewer
from codewheel.wheel import CodeWheel


@pytest.fixture
def viewer():
    fig, ax = plt.subplots(figsize=(6, 6), dpi=100)
    v = WheelViewer(CodeWheel(), fig=fig, ax=ax)
    yield v
    v.close()


def _mouse(viewer, x=None, y=None, button=1, inside=True):
    return SimpleNamespace(
        inaxes=viewer.ax if inside else None,
        xdata=x, ydata=y, button=button,
    )


def test_initial_scale_from_canvas(viewer):
    assert viewer.wheel.scaler.view_size == (600, 600)
    assert viewer.wheel.scaler.scale == pytest.approx(100.0)


def test_step_draws_frame(viewer):
    frame = viewer.step()
    assert frame.indices == [61, 94]
    assert viewer.ax.get_title() == "61  94"
    assert viewer.ax.get_xlim() == pytest.approx((-3.0, 3.0))


def test_drag_through_canvas_events(viewer):
    viewer.on_press(_mouse(viewer, 1.5, 0.0))
    viewer.on_move(_mouse(viewer, 0.0, 1.5))
    frame = viewer.step()
    assert frame.dragging is Ring.MIDDLE
    assert frame.rotations[Ring.MIDDLE] == pytest.approx(90.0)
    viewer.on_release(_mouse(viewer))
    assert viewer.step().dragging is None


def test_right_button_ignored(viewer):
    viewer.on_press(_mouse(viewer, 1.5, 0.0, button=3))
    assert viewer.step().dragging is None


def test_events_outside_axes_ignored(viewer):
    viewer.on_press(_mouse(viewer, 1.5, 0.0, inside=False))
    assert viewer.step().dragging is None


def test_resize_rescales(viewer):
    viewer.on_resize(SimpleNamespace(width=600, height=300))
    assert viewer.wheel.scaler.scale == pytest.approx(50.0)
    viewer.step()
    assert viewer.ax.get_xlim() == pytest.approx((-6.0, 6.0))
