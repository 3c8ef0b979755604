"""Motion detection on foreground masks."""

from __future__ import annotations

import math

import numpy as np

from .occupancy import Rect

MORPH_SIZE = 3
MIN_MOTION_AREA = 1
MAX_MOTION_AREA_PERCENT = 30
HISTORY_SIZE = 100


def compute_target_size(width: int, height: int) -> tuple[int, int] | None:
    """Working size ``(width, height)`` for frames of the given size.

    Returns None for an empty size, in which case frames are not resized.
    """
    if width <= 0 or height <= 0:
        return None
    ratio = math.floor((width / height) / 0.01 + 0.5)
    if ratio == 125:
        return (800, 640)
    if ratio in (177, 178):
        return (1024, 576)
    if ratio == 160:
        return (960, 600)
    return (800, 600)


def _ellipse_kernel(morph_size: int) -> np.ndarray:
    size = 2 * morph_size + 1
    r = c = morph_size
    kernel = np.zeros((size, size), dtype=bool)
    for i in range(size):
        dy = i - r
        dx = math.floor(c * math.sqrt((r * r - dy * dy) / (r * r)) + 0.5)
        kernel[i, max(c - dx, 0) : min(c + dx + 1, size)] = True
    return kernel


def _morph(mask: np.ndarray, kernel: np.ndarray, erode: bool) -> np.ndarray:
    kh, kw = kernel.shape
    ay, ax = kh // 2, kw // 2
    fill = np.iinfo(mask.dtype).max if erode else 0
    pad = [(ay, kh - ay - 1), (ax, kw - ax - 1)] + [(0, 0)] * (mask.ndim - 2)
    padded = np.pad(mask, pad, constant_values=fill)
    h, w = mask.shape[:2]
    result = None
    for dy, dx in zip(*np.nonzero(kernel)):
        window = padded[dy : dy + h, dx : dx + w]
        if result is None:
            result = window.copy()
        elif erode:
            np.minimum(result, window, out=result)
        else:
            np.maximum(result, window, out=result)
    return result


def _resize_nearest(mask: np.ndarray, size: tuple[int, int]) -> np.ndarray:
    width, height = size
    h, w = mask.shape[:2]
    rows = np.minimum((np.arange(height) * h) // height, h - 1)
    cols = np.minimum((np.arange(width) * w) // width, w - 1)
    return mask[rows][:, cols]


class MotionDetection:
    """Keeps a cleaned foreground mask and reports motion inside regions.

    ``image_size`` is the ``(width, height)`` of the original frames.
    """

    def __init__(self, image_size: tuple[int, int]) -> None:
        width, height = image_size
        self.target_size = compute_target_size(width, height)
        self.min_motion_area = MIN_MOTION_AREA
        self.max_motion_area = MAX_MOTION_AREA_PERCENT
        self.history_size = HISTORY_SIZE
        self._kernel = _ellipse_kernel(MORPH_SIZE)
        self._foreground: np.ndarray | None = None

    @property
    def resize(self) -> bool:
        return self.target_size is not None

    @property
    def foreground(self) -> np.ndarray | None:
        """The cleaned foreground mask from the last update."""
        return self._foreground

    def update(self, mask) -> None:
        """Take a new foreground mask and remove minor movements from it."""
        data = np.asarray(mask)
        if data.ndim < 2:
            raise ValueError("foreground mask must be two-dimensional")
        if data.dtype != np.uint8:
            data = np.clip(data, 0, 255).astype(np.uint8)
        if self.target_size is not None:
            width, height = self.target_size
            if data.shape[:2] != (height, width):
                data = _resize_nearest(data, self.target_size)
        eroded = _morph(data, self._kernel, erode=True)
        self._foreground = _morph(eroded, self._kernel, erode=False)

    def is_motion_detected(
        self, frame_size: tuple[int, int], roi: Rect | None = None
    ) -> bool:
        """Check for motion inside ``roi``, or the whole frame when it is empty.

        ``frame_size`` is the ``(width, height)`` of the original frame.
        """
        if self._foreground is None:
            raise RuntimeError("no foreground mask yet; call update() first")
        frame_width, frame_height = frame_size

        if roi is None or roi.area() == 0:
            motion_area = int(self._first_channel(self._foreground).sum()) // 255
            limit = frame_width * frame_height * self.max_motion_area // 100
            return self.min_motion_area < motion_area < limit

        if self.target_size is not None:
            ratio_x = self.target_size[0] / frame_width
            ratio_y = self.target_size[1] / frame_height
            roi = Rect(
                round(roi.x * ratio_x),
                round(roi.y * ratio_y),
                round(roi.width * ratio_x),
                round(roi.height * ratio_y),
            )
        h, w = self._foreground.shape[:2]
        if roi.x < 0 or roi.y < 0 or roi.x + roi.width > w or roi.y + roi.height > h:
            raise ValueError(f"region {roi} lies outside the mask of size {w}x{h}")
        region = self._foreground[roi.y : roi.y + roi.height, roi.x : roi.x + roi.width]
        motion_area = int(self._first_channel(region).sum()) // 255
        limit = roi.area() * self.max_motion_area // 100
        return self.min_motion_area < motion_area < limit

    @staticmethod
    def _first_channel(data: np.ndarray) -> np.ndarray:
        return data[..., 0] if data.ndim == 3 else data