"""Grid-based Motion Statistics (GMS) match filtering."""

import logging
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from gmsdemo.config import GmsConfig
from gmsdemo.errors import ErrorKind, Result

logger = logging.getLogger(__name__)


def image_size(image: np.ndarray) -> Tuple[int, int]:
    """Image size as (width, height), the order cv2 expects."""
    h, w = image.shape[:2]
    return w, h


def gms_available() -> bool:
    """True when the contrib xfeatures2d module with matchGMS is installed."""
    return hasattr(cv2, "xfeatures2d") and hasattr(cv2.xfeatures2d, "matchGMS")


def filter_matches(size1: Tuple[int, int], size2: Tuple[int, int],
                   keypoints1: Sequence[cv2.KeyPoint], keypoints2: Sequence[cv2.KeyPoint],
                   matches: Sequence[cv2.DMatch], config: GmsConfig) -> Result:
    """
    Filter candidate matches with GMS.

    Args:
        size1: (width, height) of the query image
        size2: (width, height) of the train image
        keypoints1: All query keypoints
        keypoints2: All train keypoints
        matches: Candidate matches indexing into the keypoint sets
        config: Rotation and scale support flags

    Returns:
        Result wrapping the retained matches, in candidate order and with
        their original indices
    """
    if len(matches) == 0:
        return Result.success([])

    if not gms_available():
        logger.error("cv2.xfeatures2d.matchGMS is unavailable; install opencv-contrib-python")
        return Result.failure(ErrorKind.FILTER_FAILURE, [])

    try:
        filtered = cv2.xfeatures2d.matchGMS(
            tuple(size1), tuple(size2), list(keypoints1), list(keypoints2), list(matches),
            withRotation=config.rotation, withScale=config.scale
        )
    except cv2.error as e:
        logger.error(f"matchGMS failed: {e}")
        return Result.failure(ErrorKind.FILTER_FAILURE, [])

    kept: List[cv2.DMatch] = list(filtered) if filtered is not None else []
    logger.debug(f"GMS kept {len(kept)}/{len(matches)} matches "
                 f"(rotation={config.rotation}, scale={config.scale})")
    return Result.success(kept)
