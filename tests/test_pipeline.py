import numpy as np

from realtime_detector.detector import Detection
from realtime_detector.pipeline import EXIT_CAPTURE_FAILED, EXIT_KEY, run_main_loop

ESC = 27


class StubCapture:
    """Yields a fixed number of frames, then fails (or never fails)."""

    def __init__(self, frames=None):
        self.remaining = frames
        self.reads = 0

    def read(self):
        self.reads += 1
        if self.remaining is not None:
            if self.remaining == 0:
                return None
            self.remaining -= 1
        return np.zeros((120, 160, 3), dtype=np.uint8)


class StubDetector:
    def __init__(self, detections=None):
        self.detections = detections or []
        self.calls = 0

    def detect(self, frame):
        self.calls += 1
        return self.detections


class StubDisplay:
    def __init__(self, keys=None):
        self.keys = list(keys or [])
        self.shown = []

    def show(self, frame):
        self.shown.append(frame.copy())

    def poll_key(self):
        if self.keys:
            return self.keys.pop(0)
        return -1

    def is_exit_key(self, key):
        return key == ESC


def test_loop_stops_on_capture_failure_after_n_frames() -> None:
    capture = StubCapture(frames=4)
    detector = StubDetector()
    display = StubDisplay()

    result = run_main_loop(capture, detector, display)

    assert result.frames == 4
    assert result.reason == EXIT_CAPTURE_FAILED
    assert detector.calls == 4
    assert len(display.shown) == 4
    assert capture.reads == 5


def test_loop_with_no_frames_runs_no_inference() -> None:
    detector = StubDetector()
    result = run_main_loop(StubCapture(frames=0), detector, StubDisplay())
    assert result.frames == 0
    assert detector.calls == 0


def test_loop_stops_on_escape_at_mth_iteration() -> None:
    detector = StubDetector()
    display = StubDisplay(keys=[-1, ord("a"), -1, ESC, -1])

    result = run_main_loop(StubCapture(), detector, display)

    assert result.frames == 4
    assert result.reason == EXIT_KEY
    assert detector.calls == 4
    assert len(display.shown) == 4


def test_loop_draws_detections_before_display() -> None:
    detector = StubDetector([Detection(15, 0.9, (10.0, 40.0, 100.0, 110.0))])
    display = StubDisplay(keys=[ESC])

    run_main_loop(StubCapture(), detector, display)

    shown = display.shown[0]
    assert tuple(shown[80, 10]) == (0, 255, 0)
