"""
Local display window using OpenCV HighGUI.
"""

import cv2
import logging
import numpy as np
from .config import DisplayConfig


logger = logging.getLogger(__name__)

ESC_KEY = 27
WAIT_MS = 1


class FrameDisplay:
    """
    Single titled window, updated once per frame.
    """

    def __init__(self, config: DisplayConfig):
        self.config = config
        self.is_open = False

    def show(self, frame: np.ndarray):
        """Show a frame in the window."""
        cv2.imshow(self.config.window_title, frame)
        self.is_open = True

    def poll_key(self) -> int:
        """
        Wait briefly for a key press.

        Returns:
            Key code (low byte), or -1 if no key was pressed
        """
        key = cv2.waitKey(WAIT_MS)
        if key == -1:
            return -1
        return key & 0xFF

    def is_exit_key(self, key: int) -> bool:
        """
        Check whether a polled key ends the session.

        Args:
            key: Value returned by poll_key

        Returns:
            True for ESC
        """
        return key == ESC_KEY

    def close(self):
        """Close all display windows."""
        if self.is_open:
            logger.info("Closing display windows")
        cv2.destroyAllWindows()
        self.is_open = False
