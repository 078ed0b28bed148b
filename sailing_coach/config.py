# Runtime constants and the command line that can override them.
# With no flags the program behaves exactly as with the constants below.
import argparse

# === Camera ===
CAM_NUM         = 1                 # capture device index
ESC_KEY         = 27

# === Windows ===
VIDEO_WINDOW    = 'Video Feed'
CONTROLS_WINDOW = 'Controls'
CALIB_WINDOW    = 'Calibration'

# === Segmentation ===
PROFILE_NAME    = 'color1'          # threshold profile saved/restored with 's'/'r'
SETTINGS_DIR    = '.'
KEY_WAIT_MS     = 30
WIN_SCALE       = 0.5               # display scale for both halves of the composite
CENTER_RADIUS   = 20

# === Calibration ===
BOARD_SIZE      = (9, 6)            # interior corners (columns, rows)
CALIB_SAMPLES   = 5
SQUARE_SIZE     = 1.0
CALIB_FILE      = 'camera_calib_result.npz'


def board_size(value):
    try:
        cols, rows = (int(v) for v in value.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected COLSxROWS, got '{value}'")
    if cols < 2 or rows < 2:
        raise argparse.ArgumentTypeError("board needs at least 2x2 interior corners")
    return cols, rows


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='sailing-coach',
        description="Live HSV colour segmentation with optional camera calibration")
    parser.add_argument('--camera', type=int, default=CAM_NUM,
                        help='Capture device index')
    parser.add_argument('--profile', default=PROFILE_NAME,
                        help="Threshold profile name used by 's' and 'r'")
    parser.add_argument('--settings-dir', default=SETTINGS_DIR,
                        help='Directory holding threshold profiles')
    parser.add_argument('--pause', type=int, default=KEY_WAIT_MS,
                        help='Wait ms for a key press each frame')
    parser.add_argument('--win-size', type=float, default=WIN_SCALE,
                        help='Display scale factor (0< <=1)')
    parser.add_argument('--board', type=board_size, default=BOARD_SIZE,
                        help='Checkerboard interior corners, e.g. 9x6')
    parser.add_argument('--samples', type=int, default=CALIB_SAMPLES,
                        help='Number of checkerboard views to collect')
    parser.add_argument('--square-size', type=float, default=SQUARE_SIZE,
                        help='Checkerboard square size in your unit of choice')
    parser.add_argument('--calib-file', default=CALIB_FILE,
                        help='Where to store the calibration result (.npz)')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')
    args = parser.parse_args(argv)
    if not 0 < args.win_size <= 1:
        parser.error('--win-size must be in (0, 1]')
    if args.samples < 1:
        parser.error('--samples must be at least 1')
    return args
