import math

import pytest

from codewheel.config import INSTANT_SNAP, FREE_INNER, WheelConfig
from codewheel.models import PointerAction, PointerEvent, Ring
from codewheel.symbols import SymbolLookupError, SymbolTable
from codewheel.wheel import CodeWheel


def _at(radius, angle_deg):
    theta = math.radians(angle_deg)
    return (radius * math.cos(theta), radius * math.sin(theta))


def press(radius, angle):
    return PointerEvent(PointerAction.PRESS, *_at(radius, angle))


def move(radius, angle):
    return PointerEvent(PointerAction.MOVE, *_at(radius, angle))


RELEASE = PointerEvent(PointerAction.RELEASE)


@pytest.fixture
def wheel():
    return CodeWheel()


# ═══════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════

def test_default_symbols_are_cell_numbers(wheel):
    assert len(wheel.symbols) == 96
    assert wheel.symbols.lookup(61) == "61"


def test_invalid_config_rejected():
    with pytest.raises(ValueError, match="Invalid wheel config"):
        CodeWheel(config=WheelConfig(snap_speed=0.0))


def test_short_symbol_table_rejected_up_front():
    with pytest.raises(SymbolLookupError):
        CodeWheel(symbols=SymbolTable.numbered(rows=3))


# ═══════════════════════════════════════════════════════════════════
# Frame loop
# ═══════════════════════════════════════════════════════════════════

def test_rest_frame(wheel):
    frame = wheel.tick()
    assert (frame.outer_section, frame.middle_section) == (0, 0)
    assert frame.indices == [61, 94]
    assert frame.codes == ["61", "94"]
    assert frame.dragging is None
    assert frame.debug == []


def test_set_sections(wheel):
    wheel.set_sections(1, 2)
    assert wheel.sections() == (1, 2)
    assert wheel.tick().indices == [63, 96]
    wheel.set_sections(0, 1)
    assert wheel.tick().indices == [5, 62]


def test_custom_codes_flow_through():
    codes = [f"C{i}" for i in range(1, 97)]
    wheel = CodeWheel(symbols=SymbolTable(codes))
    assert wheel.tick().codes == ["C61", "C94"]


def test_drag_middle_ring(wheel):
    frame = wheel.tick([press(1.5, 0.0), move(1.5, -15.0)])
    assert frame.dragging is Ring.MIDDLE
    assert frame.rotations[Ring.MIDDLE] == pytest.approx(-15.0)
    assert (frame.outer_section, frame.middle_section) == (0, 1)
    assert frame.indices == [5, 62]


def test_dragged_ring_is_not_snapped(wheel):
    wheel.tick([press(2.5, 0.0), move(2.5, 10.0)])
    for _ in range(5):
        frame = wheel.tick()
    assert frame.dragging is Ring.OUTER
    assert frame.rotations[Ring.OUTER] == pytest.approx(10.0)


def test_queued_events_are_applied_on_next_tick(wheel):
    wheel.push(press(1.5, 0.0))
    wheel.push(move(1.5, 30.0))
    assert wheel.get_rotation(Ring.MIDDLE) == 0.0
    frame = wheel.tick()
    assert frame.rotations[Ring.MIDDLE] == pytest.approx(30.0)


def test_release_snaps_to_nearest_section():
    wheel = CodeWheel(config=INSTANT_SNAP)
    frame = wheel.tick([press(1.5, 0.0), move(1.5, -20.0), RELEASE])
    assert frame.dragging is None
    assert frame.rotations[Ring.MIDDLE] == pytest.approx(-15.0)
    assert frame.middle_section == 1


def test_inner_ring_locked_by_default(wheel):
    frame = wheel.tick([press(0.5, 0.0), move(0.5, 90.0)])
    assert frame.dragging is None
    assert frame.rotations == {Ring.INNER: 0.0, Ring.MIDDLE: 0.0, Ring.OUTER: 0.0}


def test_inner_ring_free_when_configured():
    wheel = CodeWheel(config=FREE_INNER)
    frame = wheel.tick([press(0.5, 0.0), move(0.5, 90.0), RELEASE])
    assert frame.rotations[Ring.INNER] == pytest.approx(90.0)
    assert frame.indices == [61, 94]


def test_settle_eases_into_sections(wheel):
    wheel.set_rotation(Ring.OUTER, 20.0)
    wheel.set_rotation(Ring.MIDDLE, -20.0)
    frame = wheel.settle()
    assert frame.rotations[Ring.OUTER] == pytest.approx(30.0)
    assert frame.rotations[Ring.MIDDLE] == pytest.approx(-15.0)
    assert (frame.outer_section, frame.middle_section) == (11, 1)


def test_sink_receives_every_frame():
    frames = []
    wheel = CodeWheel(sink=frames.append)
    wheel.tick()
    wheel.tick()
    assert len(frames) == 2
    assert frames[-1].indices == [61, 94]


def test_custom_hit_test():
    wheel = CodeWheel(hit_test=lambda ring, point: ring is Ring.OUTER)
    frame = wheel.tick([press(0.1, 0.0), move(0.1, 90.0)])
    assert frame.dragging is Ring.OUTER


def test_debug_frame_carries_overlays():
    wheel = CodeWheel(config=WheelConfig(debug=True))
    frame = wheel.tick()
    kinds = [overlay.kind for overlay in frame.debug]
    assert kinds == ["sections", "sections", "candidates"]
    assert len(frame.debug[0].segments) == 12
    assert len(frame.debug[1].segments) == 24
    assert len(frame.debug[2].points) == 6


# ═══════════════════════════════════════════════════════════════════
# Viewport polling
# ═══════════════════════════════════════════════════════════════════

class TestPolledViewport:

    def _wheel(self, sizes, times, **config):
        calls = []

        def provider():
            calls.append(1)
            return sizes.pop(0)

        wheel = CodeWheel(
            config=WheelConfig(**config),
            size_provider=provider,
            clock=iter(times).__next__,
        )
        return wheel, calls

    def test_no_poller_without_provider(self, wheel):
        assert wheel.poller is None
        wheel.tick()
        assert wheel.scaler.view_size is None

    def test_interval_comes_from_config(self):
        wheel, calls = self._wheel([(800, 600), (600, 300)], [0.0, 0.2, 0.3], poll_interval=0.25)
        assert wheel.poller.interval == 0.25
        wheel.tick()
        assert wheel.scaler.scale == pytest.approx(100.0)
        wheel.tick()
        assert len(calls) == 1
        wheel.tick()
        assert len(calls) == 2
        assert wheel.scaler.scale == pytest.approx(50.0)
