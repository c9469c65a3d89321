"""Detector/descriptor factory."""

from enum import Enum
from typing import Optional

import cv2

from gmsdemo.config import MAX_FEATURES


class DetectorKind(Enum):
    """Detector/descriptor families the demo can build."""
    ORB = "orb"


def create_detector(detector_kind: DetectorKind,
                    max_features: int = MAX_FEATURES) -> Optional[cv2.Feature2D]:
    """
    Create a detector object for the given kind, capped at max_features.

    Returns None for kinds without a factory branch.
    """
    if detector_kind is DetectorKind.ORB:
        return cv2.ORB_create(nfeatures=max_features)
    return None
