from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import pytest
from PIL import Image


def face_keypoints(
    width: float = 100,
    height: float = 100,
    mouth: Tuple[Tuple[float, float], Tuple[float, float]] = ((80, 200), (120, 200)),
    named_midline: bool = False,
) -> List[Dict[str, float]]:
    """Keypoints whose jawline spans ``width`` and whose face height is ``height``.

    The forehead centroid sits at ``(width / 2, 0)`` and the lowest jawline
    point at ``(width / 2, height)``.
    """
    cx = width / 2
    kps = [
        {"name": "forehead_0", "x": cx - 10, "y": 0},
        {"name": "forehead_1", "x": cx, "y": 0},
        {"name": "forehead_2", "x": cx + 10, "y": 0},
        {"name": "jawline_0", "x": 0, "y": height / 2},
        {"name": "jawline_1", "x": width / 4, "y": height * 0.8},
        {"name": "jawline_2", "x": cx, "y": height},
        {"name": "jawline_3", "x": width * 3 / 4, "y": height * 0.8},
        {"name": "jawline_4", "x": width, "y": height / 2},
        {"name": "leftEye_0", "x": cx + 20, "y": 40},
        {"name": "rightEye_0", "x": cx - 20, "y": 40},
        {"name": "nose_0", "x": cx, "y": 60},
        {"name": "mouth_0", "x": cx, "y": 80},
        {"name": "lips_0", "x": 85, "y": 195},
        {"name": "lips_1", "x": 100, "y": 192},
        {"name": "lips_2", "x": 115, "y": 195},
        {"name": "lips_3", "x": 100, "y": 208},
        {"name": "lipCornerLeft", "x": mouth[0][0], "y": mouth[0][1]},
        {"name": "lipCornerRight", "x": mouth[1][0], "y": mouth[1][1]},
    ]
    if named_midline:
        kps += [
            {"name": "noseTip", "x": cx, "y": 55},
            {"name": "chin", "x": cx, "y": height},
        ]
    return kps


class RecordingRenderer:
    """Renderer that records every call as ``(method, args)``."""

    def __init__(self, width: int = 640, height: int = 480):
        self.width = width
        self.height = height
        self.calls: List[tuple] = []

    def _record(self, name, *args):
        self.calls.append((name, args))

    def clear(self):
        self._record("clear")

    def draw_image(self, image, x, y, w, h):
        self._record("draw_image", image, x, y, w, h)

    def draw_polyline(self, points, color, width):
        self._record("draw_polyline", list(points), color, width)

    def draw_points(self, points, radius, color):
        self._record("draw_points", list(points), radius, color)

    def fill_rect(self, x, y, w, h, color):
        self._record("fill_rect", x, y, w, h, color)

    def stroke_rect(self, x, y, w, h, color, width):
        self._record("stroke_rect", x, y, w, h, color, width)

    def draw_text(self, text, x, y, color, size):
        self._record("draw_text", text, x, y, color, size)

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> List[tuple]:
        return [args for n, args in self.calls if n == name]


class FakeDetector:
    def __init__(self, faces: Optional[list] = None, exc: Optional[Exception] = None):
        self.faces = faces or []
        self.exc = exc
        self.calls = 0

    def estimate_faces(self, image):
        self.calls += 1
        if self.exc is not None:
            raise self.exc
        return self.faces


@pytest.fixture
def keypoints() -> List[Dict[str, float]]:
    return face_keypoints()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def image() -> Image.Image:
    return Image.new("RGB", (320, 240), (128, 128, 128))
