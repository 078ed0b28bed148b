import numpy as np

from sailing_coach.overlay import RAW_COLOR, SEG_COLOR, compose, draw_center_axes


def test_center_axes_cross_the_middle():
    frame = np.zeros((80, 100, 3), np.uint8)
    draw_center_axes(frame, (100, 80), SEG_COLOR)
    assert (frame[40, 5] == SEG_COLOR).all()
    assert (frame[5, 50] == SEG_COLOR).all()
    assert (frame[40, 95] == SEG_COLOR).all()
    assert (frame[75, 50] == SEG_COLOR).all()
    # nothing drawn away from the guide marks
    assert not frame[5, 5].any()


def test_center_axes_add_circle():
    lines_only = np.zeros((80, 100, 3), np.uint8)
    lines_only[40, :] = RAW_COLOR
    lines_only[:, 50] = RAW_COLOR
    frame = np.zeros((80, 100, 3), np.uint8)
    draw_center_axes(frame, (100, 80), RAW_COLOR)
    extra = np.argwhere((frame != lines_only).any(axis=2))
    assert len(extra) > 0
    # everything beyond the lines lies on a radius-20 ring around the center
    dist = np.hypot(extra[:, 0] - 40, extra[:, 1] - 50)
    assert np.all(np.abs(dist - 20) <= 1.5)


def test_compose_halves_and_concatenates():
    raw = np.full((80, 100, 3), 10, np.uint8)
    seg = np.full((80, 100, 3), 200, np.uint8)
    out = compose(raw, seg)
    assert out.shape == (40, 100, 3)
    assert (out[:, :50] == 10).all()
    assert (out[:, 50:] == 200).all()


def test_compose_custom_scale():
    raw = np.zeros((80, 100, 3), np.uint8)
    assert compose(raw, raw.copy(), scale=0.25).shape == (20, 50, 3)
