# SPDX-License-Identifier: Apache-2.0
"""Bite analysis from facial keypoints.

The analyzer derives three measurements from one face:

* the facial midline, from named anatomical points when they are present
  and from eye/nose/mouth centroids otherwise;
* a coarse face-shape class from the jawline width to face height ratio;
* ideal anterior tooth widths as fixed fractions of the mouth width.

Every measurement degrades on its own when its landmarks are missing. Only an
empty keypoint set, a midline that cannot be placed, or an unexpected error
makes the whole analysis unsuccessful, and that is reported as data.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple, Union

from dentalai.anatomy.landmarks import KeypointLike, LandmarkGroup, LandmarkMap, LandmarkRole
from dentalai.config import AnalysisConfig
from dentalai.errors import InsufficientLandmarksError
from dentalai.logging_utils import get_logger
from dentalai.schemas import AnalysisResult, DentalProportions, FaceShape, Midline, Point, Shape
from dentalai.utils.geometry import angle_deg, centroid, distance, horizontal_extent, lowest_point, midpoint
from dentalai.vision.detector import LandmarkDetector

LOGGER = get_logger(__name__)

NO_FACE_ERROR = "Nenhum rosto detectado na imagem"
MIDLINE_ERROR = "Pontos faciais insuficientes para a linha média"
PROCESSING_ERROR = "Falha ao processar a imagem"

NAMED_MIDLINE_CONFIDENCE = 0.95
CENTROID_MIDLINE_CONFIDENCE = 0.8
PROPORTIONS_CONFIDENCE_FACTOR = 0.85

# (central incisors, lateral incisors, canines) as fractions of mouth width
TOOTH_RATIOS: Dict[Shape, Tuple[float, float, float]] = {
    Shape.OVAL: (0.15, 0.10, 0.08),
    Shape.ROUND: (0.16, 0.11, 0.09),
    Shape.SQUARE: (0.15, 0.10, 0.08),
    Shape.LONG: (0.17, 0.12, 0.09),
}
DEFAULT_TOOTH_RATIOS = (0.15, 0.10, 0.08)

Landmarks = Union[LandmarkMap, Iterable[KeypointLike]]


def _landmark_map(landmarks: Landmarks) -> LandmarkMap:
    if isinstance(landmarks, LandmarkMap):
        return landmarks
    return LandmarkMap.from_keypoints(landmarks)


def _point(xy) -> Point:
    return Point(x=float(xy[0]), y=float(xy[1]))


def compute_midline(landmarks: Landmarks) -> Midline:
    """Estimate the vertical symmetry axis of the face.

    Raises :class:`InsufficientLandmarksError` when the named points are
    incomplete and one of the fallback groups is empty.
    """
    lm = _landmark_map(landmarks)
    nasion = lm.get(LandmarkRole.NASION)
    chin = lm.get(LandmarkRole.CHIN)
    forehead = lm.get(LandmarkRole.FOREHEAD_CENTER)

    if nasion is not None and chin is not None and forehead is not None:
        return Midline(
            points=[_point(forehead), _point(nasion), _point(chin)],
            angle=angle_deg(forehead, chin),
            confidence=NAMED_MIDLINE_CONFIDENCE,
        )

    for group in (LandmarkGroup.LEFT_EYE, LandmarkGroup.RIGHT_EYE, LandmarkGroup.NOSE, LandmarkGroup.MOUTH):
        if lm.count(group) == 0:
            raise InsufficientLandmarksError(group.value)

    eyes = midpoint(centroid(lm.group(LandmarkGroup.LEFT_EYE)), centroid(lm.group(LandmarkGroup.RIGHT_EYE)))
    nose = centroid(lm.group(LandmarkGroup.NOSE))
    mouth = centroid(lm.group(LandmarkGroup.MOUTH))
    return Midline(
        points=[_point(eyes), _point(nose), _point(mouth)],
        angle=angle_deg(eyes, mouth),
        confidence=CENTROID_MIDLINE_CONFIDENCE,
    )


def classify_ratio(ratio: float) -> FaceShape:
    """Map a width/height ratio onto a face shape.

    Bands are tested in order, so 0.9 is oval and 1.1 falls through to square.
    """
    if 0.9 < ratio < 1.1:
        shape, confidence = Shape.ROUND, 0.8
    elif 0.8 <= ratio <= 0.9:
        shape, confidence = Shape.OVAL, 0.9
    elif ratio < 0.8:
        shape, confidence = Shape.LONG, 0.85
    else:
        shape, confidence = Shape.SQUARE, 0.75
    return FaceShape(shape=shape, ratio=ratio, confidence=confidence)


def classify_face_shape(landmarks: Landmarks, config: Optional[AnalysisConfig] = None) -> FaceShape:
    cfg = config or AnalysisConfig()
    lm = _landmark_map(landmarks)
    jawline = lm.group(LandmarkGroup.JAWLINE)
    forehead = lm.group(LandmarkGroup.FOREHEAD)
    if len(jawline) < cfg.min_jawline_points or len(forehead) < cfg.min_forehead_points:
        return FaceShape.unknown()

    face_width = horizontal_extent(jawline)
    face_height = distance(centroid(forehead), lowest_point(jawline))
    if face_height == 0:
        return FaceShape.unknown()
    return classify_ratio(face_width / face_height)


def compute_dental_proportions(
    landmarks: Landmarks,
    face_shape: FaceShape,
    config: Optional[AnalysisConfig] = None,
) -> DentalProportions:
    cfg = config or AnalysisConfig()
    lm = _landmark_map(landmarks)
    if lm.count(LandmarkGroup.JAWLINE) < cfg.min_jawline_points or lm.count(LandmarkGroup.LIPS) < cfg.min_lip_points:
        return DentalProportions.zero()

    left = lm.get(LandmarkRole.LIP_CORNER_LEFT)
    right = lm.get(LandmarkRole.LIP_CORNER_RIGHT)
    if left is None or right is None:
        return DentalProportions.zero()

    mouth_width = distance(left, right)
    central, lateral, canine = TOOTH_RATIOS.get(face_shape.shape, DEFAULT_TOOTH_RATIOS)
    return DentalProportions(
        central_incisors_width=mouth_width * central,
        lateral_incisors_width=mouth_width * lateral,
        canines_width=mouth_width * canine,
        confidence=PROPORTIONS_CONFIDENCE_FACTOR * face_shape.confidence,
    )


class BiteAnalyzer:
    """Analyse faces with an already initialised landmark detector.

    The detector is only needed for :meth:`analyze_image`; :meth:`analyze`
    works on keypoints supplied by the caller.
    """

    def __init__(self, detector: Optional[LandmarkDetector] = None, config: Optional[AnalysisConfig] = None):
        self.detector = detector
        self.config = config or AnalysisConfig()

    def analyze_image(self, image) -> AnalysisResult:
        if self.detector is None:
            raise ValueError("BiteAnalyzer was created without a landmark detector")
        try:
            faces = self.detector.estimate_faces(image)
        except Exception:
            LOGGER.exception("landmark detection failed")
            return AnalysisResult.failure(PROCESSING_ERROR)
        if not faces:
            LOGGER.info("no face detected")
            return AnalysisResult.failure(NO_FACE_ERROR)
        return self.analyze(faces[0])

    def analyze(self, keypoints: Optional[Iterable[KeypointLike]]) -> AnalysisResult:
        if not keypoints:
            return AnalysisResult.failure(NO_FACE_ERROR)
        try:
            lm = LandmarkMap.from_keypoints(keypoints)
            midline = compute_midline(lm)
            face_shape = classify_face_shape(lm, self.config)
            proportions = compute_dental_proportions(lm, face_shape, self.config)
        except InsufficientLandmarksError as exc:
            LOGGER.warning("midline unavailable", group=exc.group)
            return AnalysisResult.failure(MIDLINE_ERROR)
        except Exception:
            LOGGER.exception("bite analysis failed")
            return AnalysisResult.failure(PROCESSING_ERROR)

        LOGGER.info(
            "analysis complete",
            keypoints=len(lm),
            face_shape=face_shape.shape.value,
            midline_confidence=midline.confidence,
        )
        return AnalysisResult(
            success=True,
            midline=midline,
            face_shape=face_shape,
            dental_proportions=proportions,
            landmarks=lm.keypoints,
        )
