"""Tests for display surfaces."""

import cv2
import numpy as np
import pytest
from gmsdemo.display import surface
from gmsdemo.display.surface import DisplaySurface, OpenCVDisplay, RecordingDisplay
from gmsdemo.errors import ErrorKind


@pytest.fixture
def highgui_calls(monkeypatch):
    """Replace HighGUI calls with a recorder."""
    calls = []
    monkeypatch.setattr(surface.cv2, 'namedWindow', lambda name, flags: calls.append(('namedWindow', name, flags)))
    monkeypatch.setattr(surface.cv2, 'resizeWindow', lambda name, w, h: calls.append(('resizeWindow', name, w, h)))
    monkeypatch.setattr(surface.cv2, 'imshow', lambda name, image: calls.append(('imshow', name)))
    monkeypatch.setattr(surface.cv2, 'waitKey', lambda delay: calls.append(('waitKey', delay)) or -1)
    monkeypatch.setattr(surface.cv2, 'destroyAllWindows', lambda: calls.append(('destroyAllWindows',)))
    return calls


class TestOpenCVDisplay:
    """Test the HighGUI display."""

    def test_show_sizes_window_to_image(self, highgui_calls):
        """Test window creation, sizing and display."""
        display = OpenCVDisplay()
        result = display.show('Window', np.zeros((120, 200, 3), dtype=np.uint8))

        assert result.ok
        assert highgui_calls == [
            ('namedWindow', 'Window', cv2.WINDOW_NORMAL),
            ('resizeWindow', 'Window', 200, 120),
            ('imshow', 'Window'),
        ]

    def test_wait_and_close(self, highgui_calls):
        """Test blocking wait and window teardown."""
        display = OpenCVDisplay()
        display.wait_for_user()
        display.close_all()
        assert highgui_calls == [('waitKey', 0), ('destroyAllWindows',)]

    def test_toolkit_error_is_not_fatal(self, monkeypatch):
        """Test that toolkit failures report DISPLAY_FAILURE."""
        def broken(*args):
            raise cv2.error("no display")

        monkeypatch.setattr(surface.cv2, 'namedWindow', broken)
        result = OpenCVDisplay().show('Window', np.zeros((10, 10, 3), dtype=np.uint8))
        assert result.error is ErrorKind.DISPLAY_FAILURE
        assert not result.error.fatal


class TestRecordingDisplay:
    """Test the headless display."""

    def test_records_windows(self):
        """Test that shown images, waits and closes are recorded."""
        display = RecordingDisplay()
        image = np.zeros((5, 5, 3), dtype=np.uint8)

        assert display.show('a', image).ok
        display.show('b', image)
        display.wait_for_user()
        display.close_all()

        assert display.window_names == ['a', 'b']
        assert display.shown[0][1] is image
        assert display.wait_count == 1
        assert display.close_count == 1

    def test_base_interface(self):
        """Test that the base surface is abstract."""
        with pytest.raises(NotImplementedError):
            DisplaySurface().show('a', np.zeros((1, 1), dtype=np.uint8))
