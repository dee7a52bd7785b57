"""
Per-frame processing loop: capture, detect, draw, display, check exit.
"""

import logging
from typing import NamedTuple, Optional, Sequence

from .capture import VideoCapture
from .detector import MobileNetSSDDetector
from .display import FrameDisplay
from .utils import draw_detections, get_voc_class_names

logger = logging.getLogger(__name__)

EXIT_CAPTURE_FAILED = "capture_failed"
EXIT_KEY = "exit_key"


class LoopResult(NamedTuple):
    """Frames rendered and the reason the loop stopped."""
    frames: int
    reason: str


def run_main_loop(video_capture: VideoCapture, detector: MobileNetSSDDetector,
                  display: FrameDisplay,
                  class_names: Optional[Sequence[str]] = None) -> LoopResult:
    """
    Main processing loop.

    Runs until a frame cannot be read or the exit key is pressed. Cleanup is
    left to the caller.

    Args:
        video_capture: Opened video capture
        detector: Detector with a loaded network
        display: Display window
        class_names: Class names indexed by class id

    Returns:
        Number of frames rendered and why the loop stopped
    """
    if class_names is None:
        class_names = get_voc_class_names()

    frames = 0

    while True:
        frame = video_capture.read()

        if frame is None:
            logger.error("No frame captured from camera, exiting.")
            reason = EXIT_CAPTURE_FAILED
            break

        detections = detector.detect(frame)
        draw_detections(frame, detections, class_names)

        display.show(frame)
        frames += 1

        if display.is_exit_key(display.poll_key()):
            logger.info("Exit key pressed")
            reason = EXIT_KEY
            break

    logger.info(f"Loop finished after {frames} frames ({reason})")
    return LoopResult(frames, reason)
