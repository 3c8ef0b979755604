import pytest

from parkedge.localizer import is_video_source, localizer_detect, parse_boxes
from parkedge.occupancy import Rect


ROI = Rect(100, 100, 100, 100)


def test_no_cars_means_empty():
    assert localizer_detect([], ROI) is False


def test_shifted_car_of_same_size_occupies():
    assert localizer_detect([Rect(110, 110, 100, 100)], ROI) is True


def test_car_shifted_the_other_way_occupies():
    assert localizer_detect([Rect(90, 90, 100, 100)], ROI) is True


def test_identically_aligned_box_is_not_counted():
    # Boxes starting at the same coordinate do not count as crossing.
    assert localizer_detect([Rect(100, 100, 100, 100)], ROI) is False


def test_car_far_away_is_ignored():
    assert localizer_detect([Rect(1000, 1000, 100, 100)], ROI) is False


def test_too_small_car_is_ignored():
    assert localizer_detect([Rect(110, 110, 10, 10)], ROI) is False


def test_too_large_car_is_ignored():
    assert localizer_detect([Rect(50, 50, 300, 300)], ROI) is False


def test_small_overlap_is_not_enough():
    assert localizer_detect([Rect(180, 180, 100, 100)], ROI) is False


def test_best_candidate_wins():
    cars = [Rect(180, 180, 100, 100), Rect(110, 110, 100, 100)]
    assert localizer_detect(cars, ROI) is True


def test_order_of_cars_does_not_matter():
    cars = [Rect(110, 110, 100, 100), Rect(1000, 0, 100, 100)]
    assert localizer_detect(cars, ROI) == localizer_detect(list(reversed(cars)), ROI)


def test_roi_without_area_raises():
    with pytest.raises(ValueError):
        localizer_detect([Rect(0, 0, 10, 10)], Rect(0, 0, 0, 10))


def test_parse_boxes_builds_rects():
    assert parse_boxes([(1, 2, 3, 4), [5, 6, 7, 8]]) == [Rect(1, 2, 3, 4), Rect(5, 6, 7, 8)]


def test_parse_boxes_round_trip():
    rects = [Rect(10, 20, 30, 40), Rect(0, 0, 1, 1)]
    boxes = [(r.x, r.y, r.width, r.height) for r in rects]
    assert parse_boxes(boxes) == rects


def test_parse_boxes_empty():
    assert parse_boxes([]) == []


def test_parse_boxes_wrong_length():
    with pytest.raises(ValueError):
        parse_boxes([(1, 2, 3)])


def test_parse_boxes_non_integer():
    with pytest.raises(TypeError):
        parse_boxes([(1.5, 2, 3, 4)])


@pytest.mark.parametrize(
    "name, expected",
    [
        ("0", False),
        ("1", False),
        ("2cam", False),
        ("video.avi", True),
        ("00", True),
        ("", True),
    ],
)
def test_is_video_source(name, expected):
    assert is_video_source(name) is expected