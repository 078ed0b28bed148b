# Camera calibration from a live checkerboard feed. The result is stored
# in the same .npz layout the trackers load (camera_matrix, dist_coeffs).
import logging
import time

import cv2 as cv
import numpy as np

from sailing_coach.config import CALIB_WINDOW, ESC_KEY, KEY_WAIT_MS

FIND_FLAGS = cv.CALIB_CB_ADAPTIVE_THRESH | cv.CALIB_CB_NORMALIZE_IMAGE | cv.CALIB_CB_FAST_CHECK
SUBPIX_CRITERIA = (cv.TERM_CRITERIA_EPS + cv.TERM_CRITERIA_MAX_ITER, 30, 0.001)
SAMPLE_INTERVAL = 1.0  # seconds between accepted views, so the board can be moved


def object_points(board_size, square_size):
    """3D corner positions of a planar board (z=0), row by row.

    Args:
        board_size (tuple): interior corners as (columns, rows)
        square_size (float): edge length of one square

    Returns:
        np.ndarray: (columns*rows, 3) float32 array
    """
    cols, rows = board_size
    grid = np.zeros((cols * rows, 3), np.float32)
    grid[:, :2] = np.mgrid[0:cols, 0:rows].T.reshape(-1, 2) * square_size
    return grid


def calibrate_from_feed(source, n_samples, board_size, square_size, output=None,
                        window=CALIB_WINDOW, pause=KEY_WAIT_MS,
                        interval=SAMPLE_INTERVAL, clock=time.monotonic):
    """Collect ``n_samples`` checkerboard views from ``source`` and calibrate.

    Args:
        source: object with read() -> (ok, frame), e.g. CameraSource
        n_samples (int): number of views to collect
        board_size (tuple): interior corners as (columns, rows)
        square_size (float): edge length of one square
        output (str, optional): .npz file for camera_matrix/dist_coeffs

    Returns:
        tuple: (camera_matrix, dist_coeffs), or None if the run was
        aborted, the stream failed or calibration was not possible
    """
    grid = object_points(board_size, square_size)
    obj_points, img_points = [], []
    image_size = None
    last_sample = None

    logging.info(f"[CALIB] Show a {board_size[0]}x{board_size[1]} checkerboard, "
                 f"collecting {n_samples} views (ESC/q to abort)")
    cv.namedWindow(window, cv.WINDOW_AUTOSIZE)
    try:
        while len(img_points) < n_samples:
            ok, frame = source.read()
            if not ok:
                logging.error("[CALIB] Read from video stream failed!")
                return None

            gray = cv.cvtColor(frame, cv.COLOR_BGR2GRAY)
            image_size = gray.shape[::-1]
            found, corners = cv.findChessboardCorners(gray, board_size, None, FIND_FLAGS)

            if found:
                now = clock()
                if last_sample is None or now - last_sample >= interval:
                    corners = cv.cornerSubPix(gray, corners, (11, 11), (-1, -1), SUBPIX_CRITERIA)
                    obj_points.append(grid)
                    img_points.append(corners)
                    last_sample = now
                    logging.info(f"[CALIB] Sample {len(img_points)}/{n_samples} captured")
                cv.drawChessboardCorners(frame, board_size, corners, found)

            cv.putText(frame, f"Samples: {len(img_points)}/{n_samples}", (10, 30),
                       cv.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)
            cv.imshow(window, frame)

            key = cv.waitKey(pause) & 0xFF
            if key in (ESC_KEY, ord('q')):
                logging.warning("[CALIB] Calibration aborted by user")
                return None
    finally:
        cv.destroyWindow(window)

    try:
        rms, camera_matrix, dist_coeffs, _, _ = cv.calibrateCamera(
            obj_points, img_points, image_size, None, None)
    except cv.error as e:
        logging.error(f"[CALIB] Calibration failed: {e}")
        return None

    fx, fy = camera_matrix[0, 0], camera_matrix[1, 1]
    cx, cy = camera_matrix[0, 2], camera_matrix[1, 2]
    logging.info(f"[CALIB] RMS reprojection error {rms:.4f}")
    logging.info(f"[CALIB] fx={fx:.2f}, fy={fy:.2f}, cx={cx:.2f}, cy={cy:.2f}")
    logging.info(f"[CALIB] Distortion {np.ravel(dist_coeffs).round(5).tolist()}")

    if output:
        try:
            np.savez(output, camera_matrix=camera_matrix, dist_coeffs=dist_coeffs,
                     image_size=np.array(image_size), rms=rms)
            logging.info(f"[CALIB] Saved calibration to {output}")
        except OSError as e:
            logging.error(f"[CALIB] Could not save calibration to {output}: {e}")
    return camera_matrix, dist_coeffs
