# Threshold profile: six HSV bounds, JSON persistence and the live sliders
# in the controls window.
import json
import logging
import os

import cv2 as cv
import numpy as np

# OpenCV 8-bit HSV: hue is 0..179, saturation and value are 0..255
H_MAX = 179
SV_MAX = 255

FIELDS = ('h_min', 'h_max', 's_min', 's_max', 'v_min', 'v_max')
LIMITS = {
    'h_min': H_MAX, 'h_max': H_MAX,
    's_min': SV_MAX, 's_max': SV_MAX,
    'v_min': SV_MAX, 'v_max': SV_MAX,
}
TRACKBARS = {
    'h_min': 'H_MIN', 'h_max': 'H_MAX',
    's_min': 'S_MIN', 's_max': 'S_MAX',
    'v_min': 'V_MIN', 'v_max': 'V_MAX',
}


def profile_path(name, directory='.'):
    return os.path.join(directory, f"{name}.json")


class ThresholdSettings:
    """Inclusive HSV bounds used by the range threshold.

    min <= max is not enforced: an inverted interval simply segments
    nothing, which is what the sliders should show.
    """

    def __init__(self, h_min=0, h_max=H_MAX, s_min=0, s_max=SV_MAX,
                 v_min=0, v_max=SV_MAX):
        self.h_min = h_min
        self.h_max = h_max
        self.s_min = s_min
        self.s_max = s_max
        self.v_min = v_min
        self.v_max = v_max

    def lower(self):
        return np.array([self.h_min, self.s_min, self.v_min], dtype=np.uint8)

    def upper(self):
        return np.array([self.h_max, self.s_max, self.v_max], dtype=np.uint8)

    def as_dict(self):
        return {f: getattr(self, f) for f in FIELDS}

    def __eq__(self, other):
        if not isinstance(other, ThresholdSettings):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        vals = ', '.join(f"{f}={getattr(self, f)}" for f in FIELDS)
        return f"ThresholdSettings({vals})"

    def save(self, name, directory='.'):
        """Write the six bounds to ``<directory>/<name>.json``.

        Returns True on success; failures are logged, never raised.
        """
        path = profile_path(name, directory)
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.as_dict(), f, indent=4)
        except OSError as e:
            logging.error(f"[SETTINGS] Could not save '{name}' to {path}: {e}")
            return False
        logging.info(f"[SETTINGS] Saved '{name}' to {path}")
        return True

    def load(self, name, directory='.'):
        """Restore the six bounds from ``<directory>/<name>.json``.

        Every value is validated before any is assigned, so a missing or
        malformed profile leaves the current bounds untouched.
        """
        path = profile_path(name, directory)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            values = _validate(data)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logging.error(f"[SETTINGS] Could not load '{name}' from {path}: {e}")
            return False
        for field, value in values.items():
            setattr(self, field, value)
        logging.info(f"[SETTINGS] Loaded '{name}' from {path}: {self.as_dict()}")
        return True


def _validate(data):
    if not isinstance(data, dict):
        raise TypeError("profile must be a JSON object")
    values = {}
    for field in FIELDS:
        value = data[field]
        # bool is an int subclass, reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{field} must be an integer, got {value!r}")
        if not 0 <= value <= LIMITS[field]:
            raise ValueError(f"{field}={value} outside 0..{LIMITS[field]}")
        values[field] = value
    return values


def create_trackbars(settings, window):
    """Open the controls window with one slider per bound.

    Each slider writes straight into ``settings`` as it moves.
    """
    cv.namedWindow(window, cv.WINDOW_NORMAL)
    for field in FIELDS:
        cv.createTrackbar(TRACKBARS[field], window, getattr(settings, field),
                          LIMITS[field], _setter(settings, field))


def _setter(settings, field):
    def on_change(pos):
        setattr(settings, field, int(pos))
    return on_change


def sync_trackbars(settings, window):
    for field in FIELDS:
        cv.setTrackbarPos(TRACKBARS[field], window, getattr(settings, field))
