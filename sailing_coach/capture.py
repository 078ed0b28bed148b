import cv2 as cv


class CameraSource:
    """
    Local camera input using cv2.VideoCapture.

    Frames are read synchronously from the main loop; there is no
    background reader, so a failed read is reported straight back to
    the caller.
    """
    def __init__(self, index):
        self.index = index
        self.cap = cv.VideoCapture(index)

    def is_opened(self):
        return self.cap.isOpened()

    def read(self):
        return self.cap.read()

    def frame_size(self):
        width = int(self.cap.get(cv.CAP_PROP_FRAME_WIDTH))
        height = int(self.cap.get(cv.CAP_PROP_FRAME_HEIGHT))
        return width, height

    def release(self):
        self.cap.release()
