"""Class-index → label table for the SSD MobileNet (COCO) detector."""

import math
from typing import Any, Final, Tuple

UNKNOWN_LABEL: Final[str] = "unknown"

# Index 0 is the background class.
COCO_LABELS: Final[Tuple[str, ...]] = (
    "unknown", "person", "bicycle", "car", "motorcycle", "airplane", "bus", "train", "truck",
    "boat", "traffic light", "fire hydrant", "street sign", "stop sign", "parking meter", "bench",
    "bird", "cat", "dog", "horse", "sheep", "cow", "elephant", "bear", "zebra",
    "giraffe", "hat", "backpack", "umbrella", "shoe", "eye glasses", "handbag", "tie", "suitcase",
    "frisbee", "skis", "snowboard", "sports ball", "kite", "baseball bat", "baseball glove",
    "skateboard", "surfboard", "tennis racket", "bottle", "plate", "wine glass", "cup",
    "fork", "knife", "spoon", "bowl", "banana", "apple", "sandwich", "orange",
    "broccoli", "carrot", "hot dog", "pizza", "donut", "cake", "chair", "couch",
    "potted plant", "bed", "mirror", "dining table", "window", "desk", "toilet", "door", "tv",
    "laptop", "mouse", "remote", "keyboard", "cell phone", "microwave", "oven", "toaster", "sink",
    "refrigerator", "blender", "book", "clock", "vase", "scissors", "teddy bear", "hair drier",
    "toothbrush", "hair brush",
)


def label_for_class(class_id: Any) -> str:
    """
    Map a raw class index to its label.

    Never raises: negative, out-of-range, non-finite or non-numeric indices
    all map to "unknown".
    """
    try:
        value = float(class_id)
    except (TypeError, ValueError):
        return UNKNOWN_LABEL
    if not math.isfinite(value):
        return UNKNOWN_LABEL
    index = int(math.floor(value))
    if index < 0 or index >= len(COCO_LABELS):
        return UNKNOWN_LABEL
    return COCO_LABELS[index]
