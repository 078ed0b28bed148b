# Runtime flags and the single-key command handler polled by the main loop.
import logging

from sailing_coach.config import ESC_KEY, PROFILE_NAME, SETTINGS_DIR

NO_KEY = 255  # cv.waitKey(...) & 0xFF when nothing was pressed


class RuntimeFlags:
    """Per-run switches toggled from the keyboard.

    track_objects and tuning are toggled and reported but nothing in the
    pipeline reads them yet.
    """

    def __init__(self, track_objects=True, use_morph_ops=True, tuning=False,
                 draw_center=False):
        self.track_objects = track_objects
        self.use_morph_ops = use_morph_ops
        self.tuning = tuning
        self.draw_center = draw_center

    def __repr__(self):
        return (f"RuntimeFlags(track_objects={self.track_objects}, "
                f"use_morph_ops={self.use_morph_ops}, tuning={self.tuning}, "
                f"draw_center={self.draw_center})")


# key -> (flag attribute, label used in the notice)
TOGGLES = {
    ord('m'): ('use_morph_ops', 'Morphological operations'),
    ord('t'): ('track_objects', 'Tracking objects'),
    ord('w'): ('tuning', 'Tuning'),
    ord('c'): ('draw_center', 'Draw center axes'),
}


def toggle(flags, attr, label):
    value = not getattr(flags, attr)
    setattr(flags, attr, value)
    logging.info(f"[KEYS] {label} {'ON' if value else 'OFF'}.")
    return value


def handle_key(key, flags, settings, profile=PROFILE_NAME, directory=SETTINGS_DIR,
               on_restore=None):
    """Apply one key press. Returns False when the loop should quit.

    ``on_restore`` is called after a successful 'r' so the sliders can
    follow the restored values.
    """
    if key < 0:
        return True
    key &= 0xFF
    if key == NO_KEY:
        return True

    if key in TOGGLES:
        toggle(flags, *TOGGLES[key])
    elif key == ord('s'):
        settings.save(profile, directory)
    elif key == ord('r'):
        if settings.load(profile, directory) and on_restore is not None:
            on_restore()
    elif key in (ESC_KEY, ord('q')):
        logging.info("[KEYS] Quitting!")
        return False
    else:
        logging.info(f"[KEYS] No behavior defined for '{chr(key)}'.")
    return True
