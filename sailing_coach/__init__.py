"""Live HSV colour segmentation and camera calibration for the SailingCoach camera rig."""

__version__ = "0.1.0"
