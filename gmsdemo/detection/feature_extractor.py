"""Keypoint and descriptor extraction."""

import logging
from dataclasses import dataclass, field
from typing import List

import cv2
import numpy as np

from gmsdemo.config import MAX_FEATURES
from gmsdemo.detection.detector_factory import DetectorKind, create_detector
from gmsdemo.errors import ErrorKind, Result

logger = logging.getLogger(__name__)

# ORB descriptors are 256 bits
DESCRIPTOR_BYTES = 32


def _empty_descriptors() -> np.ndarray:
    return np.zeros((0, DESCRIPTOR_BYTES), dtype=np.uint8)


@dataclass
class Features:
    """Keypoints of one image and their descriptor rows, index for index."""
    keypoints: List[cv2.KeyPoint] = field(default_factory=list)
    descriptors: np.ndarray = field(default_factory=_empty_descriptors)

    def __len__(self) -> int:
        return len(self.keypoints)


def detect_and_compute(detector_kind: DetectorKind, image: np.ndarray,
                       max_features: int = MAX_FEATURES) -> Result:
    """
    Detect keypoints and compute descriptors for an image in a single pass.

    Args:
        detector_kind: Detector family to build through the factory
        image: BGR or grayscale image
        max_features: Feature budget handed to the detector

    Returns:
        Result wrapping Features. Unknown kinds fail with DETECTOR_UNKNOWN,
        detector errors with EXTRACTION_FAILURE.
    """
    detector = create_detector(detector_kind, max_features)
    if detector is None:
        return Result.failure(ErrorKind.DETECTOR_UNKNOWN, Features())

    gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY) if image.ndim == 3 else image

    print("Detecting keypoints for input image")
    try:
        keypoints, descriptors = detector.detectAndCompute(gray, None)
    except cv2.error as e:
        logger.error(f"{detector_kind.name} detectAndCompute failed: {e}")
        return Result.failure(ErrorKind.EXTRACTION_FAILURE, Features())

    keypoints = list(keypoints) if keypoints is not None else []
    if descriptors is None:
        descriptors = _empty_descriptors()

    if len(descriptors) != len(keypoints):
        logger.error(f"{len(keypoints)} keypoints but {len(descriptors)} descriptor rows")
        return Result.failure(ErrorKind.EXTRACTION_FAILURE, Features())

    # Response ties can let the detector keep a few more than asked for
    if len(keypoints) > max_features:
        keypoints = keypoints[:max_features]
        descriptors = descriptors[:max_features]

    logger.debug(f"Extracted {len(keypoints)} keypoints")
    return Result.success(Features(keypoints=keypoints, descriptors=descriptors))
