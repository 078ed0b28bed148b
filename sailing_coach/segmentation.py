import cv2 as cv

# Fixed noise-reduction pass: two 3x3 erodes, then two 8x8 dilates.
ERODE_ELEMENT = cv.getStructuringElement(cv.MORPH_RECT, (3, 3))
DILATE_ELEMENT = cv.getStructuringElement(cv.MORPH_RECT, (8, 8))


def threshold(frame, settings):
    """Binary mask (0/255) of pixels whose HSV lies inside all three bounds."""
    hsv = cv.cvtColor(frame, cv.COLOR_BGR2HSV)
    return cv.inRange(hsv, settings.lower(), settings.upper())


def morph_ops(mask):
    mask = cv.erode(mask, ERODE_ELEMENT)
    mask = cv.erode(mask, ERODE_ELEMENT)
    mask = cv.dilate(mask, DILATE_ELEMENT)
    return cv.dilate(mask, DILATE_ELEMENT)


def segment(frame, settings, use_morph_ops=True):
    mask = threshold(frame, settings)
    if use_morph_ops:
        mask = morph_ops(mask)
    # back to 3 channels so it can sit next to the camera frame
    return cv.cvtColor(mask, cv.COLOR_GRAY2BGR)
