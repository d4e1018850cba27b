"""Tests for rendering the wheel to PNG."""

import pytest

pytest.importorskip("matplotlib")

from codewheel.config import WheelConfig
from codewheel.models import Ring
from codewheel.render import render_png
from codewheel.wheel import CodeWheel


def test_renders_rest_state(tmp_path):
    out = render_png(CodeWheel(), tmp_path / "wheel.png", title="Rest")
    assert out.exists()
    assert out.stat().st_size > 0


def test_renders_debug_overlays(tmp_path):
    wheel = CodeWheel(config=WheelConfig(debug=True))
    out = render_png(wheel, tmp_path / "debug.png", show_debug=True, dpi=72)
    assert out.exists()
    assert out.stat().st_size > 0


def test_renders_given_frame_into_new_directory(tmp_path):
    wheel = CodeWheel()
    wheel.set_rotation(Ring.OUTER, 20.0)
    frame = wheel.settle()
    out = render_png(wheel, tmp_path / "nested" / "settled.png", frame=frame, dpi=72)
    assert out.exists()
