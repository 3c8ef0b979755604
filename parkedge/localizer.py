"""Decide spot occupancy from vehicle boxes found by a localizer."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Sequence

from .occupancy import Rect

MIN_SIZE_RATIO = 0.4
MAX_SIZE_RATIO = 1.5
OCCUPIED_OVERLAP_RATIO = 0.5


def _overlap(roi_start: int, roi_len: int, car_start: int, car_len: int) -> int | None:
    """Overlap length along one axis, or None when the boxes do not cross.

    Boxes that start at exactly the same coordinate are treated as not
    crossing.
    """
    roi_end = roi_start + roi_len
    car_end = car_start + car_len
    if car_start < roi_start < car_end:
        return car_end - roi_start
    if roi_start < car_start < roi_end:
        return roi_end - car_start
    if roi_start > car_start and roi_end < car_end:
        return roi_len
    if car_start > roi_start and car_end < roi_end:
        return car_len
    return None


def localizer_detect(cars: Iterable[Rect], roi: Rect) -> bool:
    """Return True if one of ``cars`` covers more than half of ``roi``.

    Boxes whose area is below 0.4 or above 1.5 times the area of the region
    are ignored as too small or too large.
    """
    roi_area = roi.area()
    if roi_area <= 0:
        raise ValueError(f"region of interest has no area: {roi}")

    best = 0
    for car in cars:
        size_ratio = car.area() / roi_area
        if size_ratio < MIN_SIZE_RATIO or size_ratio > MAX_SIZE_RATIO:
            continue
        x_line = _overlap(roi.x, roi.width, car.x, car.width)
        if x_line is None:
            continue
        y_line = _overlap(roi.y, roi.height, car.y, car.height)
        if y_line is None:
            continue
        best = max(best, x_line * y_line)

    return best / roi_area > OCCUPIED_OVERLAP_RATIO


def parse_boxes(boxes: Iterable[Sequence[int]]) -> list[Rect]:
    """Turn ``(x, y, width, height)`` tuples from the localizer into rectangles.

    Raises ValueError for a box without exactly four values and TypeError
    for values that are not integers.
    """
    result = []
    for box in boxes:
        values = tuple(box)
        if len(values) != 4:
            raise ValueError(f"box must have 4 values (x, y, width, height): {box!r}")
        x, y, width, height = (operator.index(v) for v in values)
        result.append(Rect(x, y, width, height))
    return result


def _atoi(text: str) -> int:
    """Leading integer of ``text`` the way C's atoi reads it; 0 if none."""
    stripped = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not ("0" <= char <= "9"):
            break
        digits += char
    return sign * int(digits) if digits else 0


def is_video_source(name: str) -> bool:
    """True if ``name`` names a video file rather than a camera number.

    A name whose leading integer is non-zero, or that is exactly "0",
    selects a camera.
    """
    return _atoi(name) == 0 and name != "0"