# Entry point: open the camera, ask whether to calibrate, then either run
# the checkerboard calibration or the live HSV segmentation loop.
import logging
from functools import partial

import cv2 as cv

from sailing_coach.calibration import calibrate_from_feed
from sailing_coach.capture import CameraSource
from sailing_coach.config import CONTROLS_WINDOW, VIDEO_WINDOW, parse_args
from sailing_coach.controls import RuntimeFlags, handle_key
from sailing_coach.overlay import RAW_COLOR, SEG_COLOR, compose, draw_center_axes
from sailing_coach.segmentation import segment
from sailing_coach.thresholds import ThresholdSettings, create_trackbars, sync_trackbars

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def run_color_segmentation(source, settings, flags, profile, settings_dir,
                           pause, win_size):
    """Capture, threshold, draw and show until quit or a failed read."""
    cv.namedWindow(VIDEO_WINDOW, cv.WINDOW_AUTOSIZE)
    create_trackbars(settings, CONTROLS_WINDOW)
    restore = partial(sync_trackbars, settings, CONTROLS_WINDOW)

    try:
        running = True
        while running:
            ok, frame = source.read()
            if not ok:
                logging.error("[SEG] Read from video stream failed!")
                break

            seg = segment(frame, settings, flags.use_morph_ops)

            if flags.draw_center:
                size = (frame.shape[1], frame.shape[0])
                draw_center_axes(frame, size, RAW_COLOR)
                draw_center_axes(seg, size, SEG_COLOR)

            cv.imshow(VIDEO_WINDOW, compose(frame, seg, win_size))

            key = cv.waitKey(pause)
            running = handle_key(key, flags, settings, profile, settings_dir,
                                 on_restore=restore)
    finally:
        cv.destroyWindow(VIDEO_WINDOW)
        cv.destroyWindow(CONTROLS_WINDOW)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    logging.info("Starting CV SailingCoach!")
    logging.info(f"[CAMERA] Attempting to open camera {args.camera}...")
    source = CameraSource(args.camera)
    if not source.is_opened():
        logging.error("[CAMERA] Couldn't open the camera!")
        source.release()
        return 1

    try:
        width, height = source.frame_size()
        logging.info(f"[CAMERA] Frame size is {width}x{height}.")

        try:
            reply = input("Calibrate camera? [Y/n] ==>")
        except EOFError:
            reply = ''
        if reply.startswith('Y'):
            logging.info("[CALIB] Running calibration...")
            calibrate_from_feed(source, args.samples, args.board, args.square_size,
                                output=args.calib_file, pause=args.pause)
        else:
            logging.info("[SEG] Running segmentation...")
            run_color_segmentation(source, ThresholdSettings(), RuntimeFlags(),
                                   args.profile, args.settings_dir,
                                   args.pause, args.win_size)
    finally:
        source.release()
    return 0
