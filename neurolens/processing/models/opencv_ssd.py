"""
OpenCV SSD Provider
-------------------

Loads an SSD MobileNet graph through cv2.dnn and exposes it as a
DetectionModel. OpenCV emits rows of (image_id, class_id, score, x1, y1, x2, y2);
they are re-emitted in the (y1, x1, y2, x2) layout the Detector expects.
"""

import logging
import os
from typing import Any, Dict, Optional

import cv2
import numpy as np

from .contracts import RAW_BOXES_KEY, RAW_SCORES_KEY, RAW_CLASSES_KEY

logger = logging.getLogger(__name__)


class OpenCVSsdModel:
    """SSD MobileNet model executed with the OpenCV DNN module."""

    def __init__(self, net: "cv2.dnn.Net", input_size: int = 300):
        self._net = net
        self.input_size = input_size

    def __call__(self, frame: np.ndarray) -> Dict[str, Any]:
        blob = cv2.dnn.blobFromImage(
            frame,
            size=(self.input_size, self.input_size),
            swapRB=True,
            crop=False,
        )
        self._net.setInput(blob)
        output = self._net.forward()
        rows = np.asarray(output, dtype=np.float32).reshape(-1, 7)

        # (x1, y1, x2, y2) -> (y1, x1, y2, x2)
        boxes = rows[:, [4, 3, 6, 5]]
        return {
            RAW_BOXES_KEY: boxes,
            RAW_SCORES_KEY: rows[:, 2],
            RAW_CLASSES_KEY: rows[:, 1],
        }


def load_ssd_model(
    model_path: str,
    config_path: str,
    input_size: int = 300,
) -> Optional[OpenCVSsdModel]:
    """
    Load an SSD MobileNet frozen graph.

    Args:
        model_path: Path to frozen_inference_graph.pb
        config_path: Path to the matching .pbtxt
        input_size: Square input resolution expected by the graph

    Returns:
        Loaded model, or None if the files are missing or OpenCV rejects them
    """
    for path in (model_path, config_path):
        if not path or not os.path.isfile(path):
            logger.error(f"Detector model file not found: {path}")
            return None

    try:
        net = cv2.dnn.readNetFromTensorflow(model_path, config_path)
    except cv2.error as exc:
        logger.error(f"Failed to load detector model '{model_path}': {exc}")
        return None

    logger.info(f"Detector model loaded from {model_path}")
    return OpenCVSsdModel(net, input_size=input_size)
