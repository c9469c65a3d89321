"""Shared fixtures for synthetic test images."""

import cv2
import numpy as np
import pytest


def make_textured_image(height: int = 240, width: int = 320, seed: int = 0) -> np.ndarray:
    """Random texture, lightly blurred so ORB finds stable corners."""
    rng = np.random.RandomState(seed)
    image = rng.randint(0, 256, (height, width, 3), dtype=np.uint8)
    return cv2.GaussianBlur(image, (3, 3), 0)


@pytest.fixture
def textured_image():
    return make_textured_image()


@pytest.fixture
def shifted_pair():
    """Two overlapping crops of the same texture, offset by a few pixels."""
    base = make_textured_image(260, 340)
    return base[0:240, 0:320].copy(), base[12:252, 16:336].copy()


@pytest.fixture
def uniform_image():
    image = np.zeros((240, 320, 3), dtype=np.uint8)
    image[:] = [90, 140, 200]
    return image


@pytest.fixture
def input_dir(tmp_path, shifted_pair):
    """Working directory holding decodable dog01.jpg and dog02.jpg."""
    image1, image2 = shifted_pair
    cv2.imwrite(str(tmp_path / "dog01.jpg"), image1)
    cv2.imwrite(str(tmp_path / "dog02.jpg"), image2)
    return tmp_path


@pytest.fixture
def rotated_pair():
    """A texture and the same texture turned a quarter turn clockwise."""
    image = make_textured_image()
    return image, cv2.rotate(image, cv2.ROTATE_90_CLOCKWISE)
