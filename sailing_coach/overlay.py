import cv2 as cv

from sailing_coach.config import CENTER_RADIUS, WIN_SCALE

RAW_COLOR = (255, 255, 255)
SEG_COLOR = (0, 255, 0)


def draw_center_axes(frame, size, color, radius=CENTER_RADIUS):
    width, height = size
    cx, cy = width // 2, height // 2
    cv.line(frame, (0, cy), (width, cy), color, 1)
    cv.line(frame, (cx, 0), (cx, height), color, 1)
    cv.circle(frame, (cx, cy), radius, color, 1)
    return frame


def compose(raw, seg, scale=WIN_SCALE):
    left = cv.resize(raw, (0, 0), fx=scale, fy=scale)
    right = cv.resize(seg, (0, 0), fx=scale, fy=scale)
    return cv.hconcat([left, right])
