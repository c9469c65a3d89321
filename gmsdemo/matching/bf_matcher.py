"""Brute-force descriptor matching."""

from typing import List

import cv2
import numpy as np


def compute_matches(query_descriptors: np.ndarray,
                    train_descriptors: np.ndarray) -> List[cv2.DMatch]:
    """
    Match every query descriptor to its closest train descriptor.

    Hamming distance, no cross-check: a train row may be matched by several
    query rows and the result holds one match per query row. Empty inputs
    give no matches.
    """
    if query_descriptors is None or train_descriptors is None:
        return []
    if len(query_descriptors) == 0 or len(train_descriptors) == 0:
        return []

    matcher = cv2.BFMatcher(cv2.NORM_HAMMING, crossCheck=False)
    return list(matcher.match(query_descriptors, train_descriptors))
