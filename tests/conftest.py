import cv2 as cv
import numpy as np
import pytest


class FakeSource:
    """Stands in for CameraSource: hands out the given frames, then fails."""

    def __init__(self, frames):
        self.frames = list(frames)
        self.released = False

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0).copy()

    def frame_size(self):
        return 64, 48

    def release(self):
        self.released = True


class HighGui:
    """Records window calls and replays a scripted list of key codes."""

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.created = []
        self.destroyed = []
        self.shown = []
        self.trackbars = {}
        self.positions = {}

    def namedWindow(self, name, flags=None):
        self.created.append(name)

    def destroyWindow(self, name):
        self.destroyed.append(name)

    def imshow(self, name, image):
        self.shown.append((name, image.copy()))

    def waitKey(self, delay=0):
        return self.keys.pop(0) if self.keys else -1

    def createTrackbar(self, name, window, value, count, on_change):
        self.trackbars[name] = (value, count, on_change)
        self.positions[name] = value

    def setTrackbarPos(self, name, window, pos):
        self.positions[name] = pos
        self.trackbars[name][2](pos)


@pytest.fixture
def highgui(monkeypatch):
    gui = HighGui()
    for attr in ('namedWindow', 'destroyWindow', 'imshow', 'waitKey',
                 'createTrackbar', 'setTrackbarPos'):
        monkeypatch.setattr(cv, attr, getattr(gui, attr))
    return gui


def hsv_frame(h, s, v, shape=(48, 64)):
    """BGR frame whose every pixel has (approximately) the given HSV value."""
    hsv = np.zeros(shape + (3,), np.uint8)
    hsv[:] = (h, s, v)
    return cv.cvtColor(hsv, cv.COLOR_HSV2BGR)


@pytest.fixture
def make_frame():
    return hsv_frame


@pytest.fixture
def fake_source():
    return FakeSource
