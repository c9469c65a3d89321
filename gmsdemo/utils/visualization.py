"""Visualization utilities for match display."""

from typing import Sequence

import cv2
import numpy as np


def draw_matches(image1: np.ndarray, keypoints1: Sequence[cv2.KeyPoint],
                 image2: np.ndarray, keypoints2: Sequence[cv2.KeyPoint],
                 matches: Sequence[cv2.DMatch]) -> np.ndarray:
    """
    Draw matches between two images placed side by side.

    The composite is (w1 + w2) wide and max(h1, h2) tall, image1 on the left.
    """
    return cv2.drawMatches(image1, list(keypoints1), image2, list(keypoints2),
                           list(matches), None)
