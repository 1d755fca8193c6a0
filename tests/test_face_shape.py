import pytest

from conftest import face_keypoints
from dentalai.analyze.engine import classify_face_shape, classify_ratio
from dentalai.config import AnalysisConfig
from dentalai.schemas import Shape


@pytest.mark.parametrize(
    "ratio, shape, confidence",
    [
        (1.0, Shape.ROUND, 0.8),
        (0.85, Shape.OVAL, 0.9),
        (0.5, Shape.LONG, 0.85),
        (1.5, Shape.SQUARE, 0.75),
        (0.9, Shape.OVAL, 0.9),
        (0.8, Shape.OVAL, 0.9),
        (1.1, Shape.SQUARE, 0.75),
        (0.7999, Shape.LONG, 0.85),
    ],
)
def test_ratio_bands(ratio, shape, confidence):
    fs = classify_ratio(ratio)
    assert fs.shape is shape
    assert fs.confidence == confidence
    assert fs.ratio == ratio


@pytest.mark.parametrize(
    "width, height, shape",
    [(100, 100, Shape.ROUND), (90, 100, Shape.OVAL), (110, 100, Shape.SQUARE), (60, 100, Shape.LONG)],
)
def test_classify_from_keypoints(width, height, shape):
    fs = classify_face_shape(face_keypoints(width=width, height=height))
    assert fs.shape is shape
    assert fs.ratio == width / height


def test_too_few_jawline_points_is_unknown():
    kps = [k for k in face_keypoints() if k["name"] != "jawline_4"]
    fs = classify_face_shape(kps)
    assert fs.shape is Shape.UNKNOWN
    assert fs.confidence == 0
    assert fs.ratio is None


def test_too_few_forehead_points_is_unknown():
    kps = [k for k in face_keypoints() if k["name"] != "forehead_2"]
    assert classify_face_shape(kps).shape is Shape.UNKNOWN


def test_thresholds_come_from_config():
    kps = [k for k in face_keypoints() if k["name"] != "jawline_4"]
    fs = classify_face_shape(kps, AnalysisConfig(min_jawline_points=4))
    assert fs.shape is not Shape.UNKNOWN


def test_zero_face_height_is_unknown():
    # forehead centroid coincides with the lowest jawline point
    kps = [
        {"name": "forehead_0", "x": 40, "y": 0},
        {"name": "forehead_1", "x": 50, "y": 0},
        {"name": "forehead_2", "x": 60, "y": 0},
        {"name": "jawline_0", "x": 50, "y": 0},
        {"name": "jawline_1", "x": 0, "y": -10},
        {"name": "jawline_2", "x": 25, "y": -20},
        {"name": "jawline_3", "x": 75, "y": -20},
        {"name": "jawline_4", "x": 100, "y": -10},
    ]
    fs = classify_face_shape(kps)
    assert fs.shape is Shape.UNKNOWN
    assert fs.confidence == 0
    assert fs.ratio is None
