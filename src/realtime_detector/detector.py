"""
MobileNet-SSD detection module.
"""

import logging
import numpy as np
from typing import List, NamedTuple, Tuple
from .network import SSDNetwork

logger = logging.getLogger(__name__)

CONFIDENCE_THRESHOLD = 0.5


class Detection(NamedTuple):
    """A single detection in pixel coordinates."""
    class_id: int
    confidence: float
    box: Tuple[float, float, float, float]


def parse_detections(output: np.ndarray, width: int, height: int,
                     threshold: float = CONFIDENCE_THRESHOLD) -> List[Detection]:
    """
    Turn a [1, 1, N, 7] SSD output into detections above the threshold.

    Each row is (batch, class_id, confidence, x0, y0, x1, y1) with normalized
    coordinates; x is scaled by width and y by height. No clamping, no NMS.

    Args:
        output: Raw network output
        width: Frame width in pixels
        height: Frame height in pixels
        threshold: Exclusive confidence threshold

    Returns:
        Detections in row order
    """
    rows = np.asarray(output).reshape(-1, 7)
    detections = []

    for row in rows:
        confidence = float(row[2])
        if not confidence > threshold:
            continue

        box = (
            float(row[3]) * width,
            float(row[4]) * height,
            float(row[5]) * width,
            float(row[6]) * height,
        )
        detections.append(Detection(int(row[1]), confidence, box))

    return detections


class MobileNetSSDDetector:
    """Runs frames through an SSDNetwork and parses the output."""

    def __init__(self, network: SSDNetwork):
        self.network = network
        self.inference_count = 0

    def detect(self, frame: np.ndarray) -> List[Detection]:
        """
        Detect objects in a frame.

        Returns:
            Detections with boxes in the frame's pixel coordinates
        """
        height, width = frame.shape[:2]
        blob = self.network.preprocess(frame)
        output = self.network.forward(blob)
        self.inference_count += 1

        detections = parse_detections(output, width, height)
        logger.debug(f"Frame {self.inference_count}: {len(detections)} detections")
        return detections

    def cleanup(self):
        """Release detector resources."""
        self.network.cleanup()
