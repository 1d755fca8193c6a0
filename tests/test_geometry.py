import numpy as np
import pytest

from dentalai.utils.geometry import angle_deg, centroid, distance, horizontal_extent, lowest_point, midpoint


def test_centroid_is_mean():
    pts = np.array([[0, 0], [2, 0], [4, 6]])
    assert centroid(pts).tolist() == [2.0, 2.0]


def test_centroid_of_empty_group_raises():
    with pytest.raises(ValueError):
        centroid(np.empty((0, 2)))


def test_midpoint_and_distance():
    assert midpoint([0, 0], [4, 2]).tolist() == [2.0, 1.0]
    assert distance([80, 200], [120, 200]) == 40.0
    assert distance([0, 0], [3, 4]) == 5.0


def test_horizontal_extent():
    assert horizontal_extent([[5, 1], [-3, 2], [10, 0]]) == 13.0
    assert horizontal_extent([[5, 1]]) == 0.0


def test_lowest_point_prefers_first_on_ties():
    pts = np.array([[0, 10], [1, 30], [2, 30], [3, 5]])
    assert lowest_point(pts).tolist() == [1.0, 30.0]


def test_angle_deg():
    assert angle_deg([0, 0], [0, 10]) == pytest.approx(90.0)
    assert angle_deg([0, 0], [10, 0]) == pytest.approx(0.0)
    assert angle_deg([0, 0], [-1, -1]) == pytest.approx(-135.0)
