"""Image loading."""

import logging
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from gmsdemo.errors import ErrorKind, Result

logger = logging.getLogger(__name__)


def empty_image() -> np.ndarray:
    """Image with no pixel storage and zero dimensions."""
    return np.empty((0, 0, 3), dtype=np.uint8)


def is_valid_image(image: Optional[np.ndarray]) -> bool:
    """Check that the image has non-zero dimensions and allocated storage."""
    if image is None or image.size == 0 or image.ndim < 2:
        return False
    return image.shape[0] > 0 and image.shape[1] > 0


def load_image(image_path: Union[str, Path]) -> Result:
    """
    Load image from file.

    Missing, unsupported or corrupt files give an empty image together with
    ErrorKind.INPUT_MISSING; this never raises.
    """
    try:
        image = cv2.imread(str(image_path))
    except cv2.error as e:
        logger.debug(f"Decoder rejected {image_path}: {e}")
        image = None

    if not is_valid_image(image):
        logger.debug(f"Could not load image from {image_path}")
        return Result.failure(ErrorKind.INPUT_MISSING, empty_image())

    logger.debug(f"Loaded {image_path}: {image.shape[1]} x {image.shape[0]}")
    return Result.success(image)
