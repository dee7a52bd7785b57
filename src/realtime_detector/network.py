"""
OpenCV DNN wrapper for the MobileNet-SSD Caffe model.
"""

import os
import cv2
import logging
import numpy as np
from typing import Optional
from .config import NetworkConfig

logger = logging.getLogger(__name__)

# MobileNet-SSD was trained on this exact input recipe
INPUT_SIZE = (300, 300)
SCALE_FACTOR = 0.007843
MEAN = (127.5, 127.5, 127.5)

BACKENDS = {
    "opencv": "DNN_BACKEND_OPENCV",
    "cuda": "DNN_BACKEND_CUDA",
}

TARGETS = {
    "cpu": "DNN_TARGET_CPU",
    "opencl": "DNN_TARGET_OPENCL",
    "cuda": "DNN_TARGET_CUDA",
}


class NetworkLoadError(RuntimeError):
    """Raised when the network cannot be loaded."""


class SSDNetwork:
    """MobileNet-SSD network loaded through cv2.dnn."""

    def __init__(self, weights_path: str, config_path: str,
                 config: Optional[NetworkConfig] = None):
        self.weights_path = weights_path
        self.config_path = config_path
        self.config = config or NetworkConfig()
        self.net = None
        self.is_initialized = False

    def load(self) -> None:
        """
        Load the Caffe model and set the preferable backend and target.

        Raises:
            NetworkLoadError: If a path is missing, unparseable, or the net is empty
        """
        for path in (self.weights_path, self.config_path):
            if not os.path.isfile(path):
                raise NetworkLoadError(f"Model file not found: {path}")

        if not hasattr(cv2.dnn, "readNetFromCaffe"):
            raise NetworkLoadError(
                f"OpenCV {cv2.__version__} has no Caffe importer; install opencv-python<5"
            )

        logger.info(f"Loading model: {self.weights_path} (config: {self.config_path})")

        try:
            net = cv2.dnn.readNetFromCaffe(self.config_path, self.weights_path)
        except cv2.error as e:
            raise NetworkLoadError(f"Failed to parse network: {e}") from e

        if net is None or net.empty():
            raise NetworkLoadError("Failed to load network. Check model and config paths.")

        net.setPreferableBackend(getattr(cv2.dnn, BACKENDS[self.config.backend]))
        net.setPreferableTarget(getattr(cv2.dnn, TARGETS[self.config.target]))
        logger.info(f"Network ready - backend: {self.config.backend}, target: {self.config.target}")

        self.net = net
        self.is_initialized = True

    def preprocess(self, frame: np.ndarray) -> np.ndarray:
        """Build a 1x3x300x300 blob: (pixel - 127.5) * 0.007843, no swap, no crop."""
        return cv2.dnn.blobFromImage(
            frame, SCALE_FACTOR, INPUT_SIZE, MEAN, swapRB=False, crop=False
        )

    def forward(self, blob: np.ndarray) -> np.ndarray:
        """
        Run a single forward pass.

        Returns:
            Detection tensor of shape [1, 1, N, 7]
        """
        if not self.is_initialized or self.net is None:
            raise NetworkLoadError("Network is not loaded")

        self.net.setInput(blob)
        return self.net.forward()

    def cleanup(self):
        """Release network resources."""
        self.net = None
        self.is_initialized = False
