import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from codewheel import CodeWheel, PointerAction, PointerEvent, Ring


def main() -> None:
    wheel = CodeWheel()

    for outer, middle in [(0, 0), (0, 1), (1, 2)]:
        wheel.set_sections(outer, middle)
        frame = wheel.tick()
        print(f"outer={outer:>2} middle={middle:>2} ->", ", ".join(frame.codes))

    # Drag the middle ring a quarter turn and let it settle.
    wheel.set_sections(0, 0)
    wheel.tick([
        PointerEvent(PointerAction.PRESS, 1.5, 0.0),
        PointerEvent(PointerAction.MOVE, 0.0, 1.5),
        PointerEvent(PointerAction.RELEASE),
    ])
    frame = wheel.settle()
    print(
        f"after drag: middle at {frame.rotations[Ring.MIDDLE]:.1f} deg,"
        f" section {frame.middle_section} ->", ", ".join(frame.codes)
    )


if __name__ == "__main__":
    main()
