"""Display surfaces for showing images to the user."""

import logging
from typing import List, Tuple

import cv2
import numpy as np

from gmsdemo.errors import ErrorKind, Result

logger = logging.getLogger(__name__)


class DisplaySurface:
    """Minimal windowing interface used by the demo driver."""

    def show(self, window_name: str, image: np.ndarray) -> Result:
        raise NotImplementedError

    def wait_for_user(self):
        raise NotImplementedError

    def close_all(self):
        raise NotImplementedError


class OpenCVDisplay(DisplaySurface):
    """HighGUI windows, resizable and sized to the image shown."""

    def show(self, window_name: str, image: np.ndarray) -> Result:
        """Display image in a named window sized to fit it."""
        try:
            # create window for displaying image with ability to resize
            cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)
            cv2.resizeWindow(window_name, image.shape[1], image.shape[0])
            cv2.imshow(window_name, image)
        except cv2.error as e:
            logger.warning(f"Unable to display '{window_name}': {e}")
            return Result.failure(ErrorKind.DISPLAY_FAILURE)
        return Result.success(window_name)

    def wait_for_user(self):
        """Block until any key is pressed on a focused window."""
        cv2.waitKey(0)

    def close_all(self):
        cv2.destroyAllWindows()


class RecordingDisplay(DisplaySurface):
    """Headless display that records what would have been shown."""

    def __init__(self):
        self.shown: List[Tuple[str, np.ndarray]] = []
        self.wait_count = 0
        self.close_count = 0

    @property
    def window_names(self) -> List[str]:
        return [name for name, _ in self.shown]

    def show(self, window_name: str, image: np.ndarray) -> Result:
        self.shown.append((window_name, image))
        return Result.success(window_name)

    def wait_for_user(self):
        self.wait_count += 1

    def close_all(self):
        self.close_count += 1
