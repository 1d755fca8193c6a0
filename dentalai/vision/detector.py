# SPDX-License-Identifier: Apache-2.0
"""Face landmark detectors producing the named keypoint contract."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

import numpy as np
from PIL import Image

from dentalai.anatomy.landmarks import MEDIAPIPE_GROUPS, MEDIAPIPE_ROLES
from dentalai.config import DetectorConfig
from dentalai.errors import DetectorError
from dentalai.schemas import Keypoint

try:
    import mediapipe as mp
    MEDIAPIPE_AVAILABLE = True
except ImportError:
    MEDIAPIPE_AVAILABLE = False
    logging.info("MediaPipe not available, image analysis requires an injected detector")


class LandmarkDetector(Protocol):
    """Anything that turns an image into one keypoint list per detected face."""

    def estimate_faces(self, image) -> List[List[Keypoint]]:
        ...


def to_rgb_array(image) -> np.ndarray:
    """Accept a PIL image, a path or an ``HxWx3`` array and return uint8 RGB."""
    if isinstance(image, np.ndarray):
        arr = image
    else:
        if not isinstance(image, Image.Image):
            image = Image.open(image)
        arr = np.asarray(image.convert("RGB"))
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"expected an RGB image, got array of shape {arr.shape}")
    return arr.astype(np.uint8, copy=False)


def mesh_to_keypoints(mesh_points: np.ndarray) -> List[Keypoint]:
    """Name Face Mesh vertices (pixel coordinates, ``(N, 2|3)``) for the analyzer."""
    keypoints: List[Keypoint] = []
    for role, idx in MEDIAPIPE_ROLES.items():
        x, y = mesh_points[idx][:2]
        keypoints.append(Keypoint(name=role.value, x=float(x), y=float(y)))
    for group, indices in MEDIAPIPE_GROUPS.items():
        for idx in indices:
            x, y = mesh_points[idx][:2]
            keypoints.append(Keypoint(name=f"{group.value}_{idx}", x=float(x), y=float(y)))
    return keypoints


class MediaPipeFaceMeshDetector:
    """Face Mesh wrapper; create once and inject into :class:`BiteAnalyzer`."""

    def __init__(self, config: Optional[DetectorConfig] = None):
        if not MEDIAPIPE_AVAILABLE:
            raise DetectorError("mediapipe is not installed; install the 'mediapipe' extra")
        cfg = config or DetectorConfig()
        try:
            self._mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=True,
                max_num_faces=cfg.max_faces,
                refine_landmarks=cfg.refine_landmarks,
                min_detection_confidence=cfg.min_detection_confidence,
            )
        except Exception as exc:
            raise DetectorError(f"MediaPipe initialization failed: {exc}") from exc

    def estimate_faces(self, image) -> List[List[Keypoint]]:
        rgb = to_rgb_array(image)
        h, w = rgb.shape[:2]
        results = self._mesh.process(rgb)
        if not results.multi_face_landmarks:
            return []
        faces = []
        for face in results.multi_face_landmarks:
            pts = np.array([[lm.x * w, lm.y * h] for lm in face.landmark], dtype=float)
            faces.append(mesh_to_keypoints(pts))
        return faces

    def close(self) -> None:
        self._mesh.close()

    def __enter__(self) -> "MediaPipeFaceMeshDetector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
