import numpy as np
import pytest

from parkedge.motion import MotionDetection, compute_target_size
from parkedge.occupancy import Rect


@pytest.mark.parametrize(
    "size, expected",
    [
        ((640, 512), (800, 640)),
        ((1920, 1080), (1024, 576)),
        ((1280, 800), (960, 600)),
        ((640, 480), (800, 600)),
    ],
)
def test_compute_target_size(size, expected):
    assert compute_target_size(*size) == expected


def test_compute_target_size_empty():
    assert compute_target_size(0, 480) is None


def _block_mask():
    mask = np.zeros((100, 100), dtype=np.uint8)
    mask[10:30, 10:30] = 255
    return mask


def test_block_detected_over_whole_frame():
    detector = MotionDetection((0, 0))
    detector.update(_block_mask())
    fg = detector.foreground
    assert fg[20, 20] == 255
    assert int(fg.sum()) // 255 <= 400
    assert detector.is_motion_detected((100, 100)) is True


def test_isolated_pixel_is_removed():
    mask = np.zeros((100, 100), dtype=np.uint8)
    mask[50, 50] = 255
    detector = MotionDetection((0, 0))
    detector.update(mask)
    assert int(detector.foreground.sum()) == 0
    assert detector.is_motion_detected((100, 100)) is False


def test_full_frame_motion_is_too_large():
    detector = MotionDetection((0, 0))
    detector.update(np.full((100, 100), 255, dtype=np.uint8))
    assert detector.is_motion_detected((100, 100)) is False


def test_roi_motion():
    detector = MotionDetection((0, 0))
    detector.update(_block_mask())
    assert detector.is_motion_detected((100, 100), Rect(0, 0, 50, 50)) is True
    assert detector.is_motion_detected((100, 100), Rect(50, 50, 50, 50)) is False


def test_mask_resized_to_target():
    detector = MotionDetection((640, 480))
    detector.update(np.zeros((480, 640), dtype=np.uint8))
    assert detector.foreground.shape == (600, 800)


def test_query_before_update_raises():
    detector = MotionDetection((0, 0))
    with pytest.raises(RuntimeError):
        detector.is_motion_detected((100, 100))