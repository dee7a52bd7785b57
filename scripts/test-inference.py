#!/usr/bin/env python3
"""
Run a single image through MobileNet-SSD and dump the raw and parsed output.

Usage: test-inference.py <caffemodel> <prototxt> [image]
Without an image, one frame is grabbed from camera 0.
"""

import sys
import logging

import cv2

from realtime_detector.detector import parse_detections
from realtime_detector.network import SSDNetwork, NetworkLoadError
from realtime_detector.utils import class_label, draw_detections

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    if len(sys.argv) < 3:
        print(__doc__)
        return 0

    network = SSDNetwork(sys.argv[1], sys.argv[2])
    try:
        network.load()
    except NetworkLoadError as e:
        logger.error(e)
        return 1

    if len(sys.argv) > 3:
        frame = cv2.imread(sys.argv[3])
    else:
        cap = cv2.VideoCapture(0)
        ret, frame = cap.read()
        cap.release()
        if not ret:
            frame = None

    if frame is None:
        logger.error("Failed to get an input frame")
        return 1

    logger.info(f"Input frame: {frame.shape}, dtype: {frame.dtype}")

    blob = network.preprocess(frame)
    logger.info(f"Blob: {blob.shape}, range=[{blob.min():.3f}, {blob.max():.3f}]")

    output = network.forward(blob)
    logger.info(f"Output: shape={output.shape}, dtype={output.dtype}")
    logger.info(f"  Candidate rows: {output.reshape(-1, 7).shape[0]}")

    h, w = frame.shape[:2]
    detections = parse_detections(output, w, h)
    for det in detections:
        logger.info(
            f"  {class_label(det.class_id)}: {det.confidence:.2f} "
            f"box={[round(v, 1) for v in det.box]}"
        )

    draw_detections(frame, detections)
    cv2.imwrite("/tmp/test_detections.jpg", frame)
    logger.info("Saved annotated frame to /tmp/test_detections.jpg")

    network.cleanup()
    return 0


if __name__ == "__main__":
    sys.exit(main())
