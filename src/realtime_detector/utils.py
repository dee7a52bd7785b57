"""
Utility functions for labels and drawing.
"""

import cv2
import numpy as np
from typing import Sequence, Tuple

from .detector import Detection

FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_SCALE = 0.5
FONT_THICKNESS = 1

BOX_COLOR = (0, 255, 0)
LABEL_BG_COLOR = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)

VOC_CLASS_NAMES: Tuple[str, ...] = (
    "background", "aeroplane", "bicycle", "bird", "boat", "bottle",
    "bus", "car", "cat", "chair", "cow", "diningtable", "dog",
    "horse", "motorbike", "person", "pottedplant", "sheep", "sofa",
    "train", "tvmonitor",
)


def get_voc_class_names() -> Tuple[str, ...]:
    """
    Get PASCAL VOC class names (21 classes, index 0 is background).

    Returns:
        Tuple of class names indexed by class id
    """
    return VOC_CLASS_NAMES


def class_label(class_id: int, class_names: Sequence[str] = VOC_CLASS_NAMES) -> str:
    """Resolve a class id to its name, or 'id:<n>' when out of range."""
    if 0 <= class_id < len(class_names):
        return class_names[class_id]
    return f"id:{class_id}"


def format_caption(label: str, confidence: float) -> str:
    """
    Build the caption drawn above a box.

    Args:
        label: Class label
        confidence: Detection confidence (0-1)

    Returns:
        "<label>: <confidence>" with two decimals
    """
    return f"{label}: {confidence:.2f}"


def draw_detections(image: np.ndarray, detections: Sequence[Detection],
                    class_names: Sequence[str] = VOC_CLASS_NAMES) -> np.ndarray:
    """
    Draw bounding boxes and captions on the image in place.

    The caption background sits above the box; top = max(y0, label height)
    keeps it inside the frame when the box touches the top edge.

    Args:
        image: Frame to draw on (BGR format), modified in place
        detections: Detections in pixel coordinates
        class_names: Class names indexed by class id

    Returns:
        The same image
    """
    for det in detections:
        x0, y0, x1, y1 = det.box
        left = int(x0)

        cv2.rectangle(image, (left, int(y0)), (int(x1), int(y1)), BOX_COLOR, 2)

        caption = format_caption(class_label(det.class_id, class_names), det.confidence)
        (label_w, label_h), baseline = cv2.getTextSize(
            caption, FONT, FONT_SCALE, FONT_THICKNESS
        )
        top = int(max(y0, label_h))

        cv2.rectangle(
            image,
            (left, top - label_h - 8),
            (left + label_w, top + baseline),
            LABEL_BG_COLOR,
            cv2.FILLED
        )
        cv2.putText(image, caption, (left, top - 4), FONT, FONT_SCALE, TEXT_COLOR)

    return image
