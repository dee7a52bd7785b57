"""
Video capture module using OpenCV.
"""

import cv2
import logging
import numpy as np
from typing import Optional


logger = logging.getLogger(__name__)

CAMERA_INDEX = 0


class CameraError(RuntimeError):
    """Raised when the camera device cannot be opened."""


class VideoCapture:
    """
    Thin wrapper over a single camera device. No reconnection.
    """

    def __init__(self):
        self.cap: Optional[cv2.VideoCapture] = None
        self.is_opened = False
        self.frame_count = 0

    def open(self) -> None:
        """
        Open the camera device.

        Raises:
            CameraError: If the device cannot be opened
        """
        logger.info(f"Opening camera index {CAMERA_INDEX}")
        self.cap = cv2.VideoCapture(CAMERA_INDEX)

        if not self.cap.isOpened():
            self.release()
            raise CameraError(f"Cannot open camera ({CAMERA_INDEX}).")

        width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        logger.info(f"Camera opened: {width}x{height}")

        self.is_opened = True

    def read(self) -> Optional[np.ndarray]:
        """
        Read a frame from the camera.

        Returns:
            Frame as numpy array (BGR), or None if the read failed or was empty
        """
        if not self.is_opened or self.cap is None:
            return None

        ret, frame = self.cap.read()

        if not ret or frame is None or frame.size == 0:
            logger.warning("Failed to read frame from camera")
            return None

        self.frame_count += 1
        return frame

    def release(self):
        """Release video capture resources."""
        if self.cap is not None:
            logger.info("Releasing video capture")
            self.cap.release()
            self.cap = None
        self.is_opened = False
