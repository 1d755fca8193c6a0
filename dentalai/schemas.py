# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from dentalai.utils.io import read_json, write_json


class _Model(BaseModel):
    """Immutable model serialised with the camelCase keys used by the web client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Point(_Model):
    x: float
    y: float


class Keypoint(_Model):
    name: str
    x: float
    y: float
    z: Optional[float] = None


class Shape(str, Enum):
    ROUND = "round"
    OVAL = "oval"
    SQUARE = "square"
    LONG = "long"
    UNKNOWN = "unknown"


class Midline(_Model):
    points: List[Point]
    angle: float
    confidence: float


class FaceShape(_Model):
    shape: Shape
    ratio: Optional[float] = None
    confidence: float

    @classmethod
    def unknown(cls) -> "FaceShape":
        return cls(shape=Shape.UNKNOWN, confidence=0.0)


class DentalProportions(_Model):
    central_incisors_width: float
    lateral_incisors_width: float
    canines_width: float
    confidence: float

    @classmethod
    def zero(cls) -> "DentalProportions":
        return cls(
            central_incisors_width=0.0,
            lateral_incisors_width=0.0,
            canines_width=0.0,
            confidence=0.0,
        )


class AnalysisResult(_Model):
    success: bool
    midline: Optional[Midline] = None
    face_shape: Optional[FaceShape] = None
    dental_proportions: Optional[DentalProportions] = None
    landmarks: Optional[List[Keypoint]] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome(self) -> "AnalysisResult":
        if self.success:
            missing = [
                name for name in ("midline", "face_shape", "dental_proportions") if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(f"successful analysis is missing {', '.join(missing)}")
        elif not self.error:
            raise ValueError("failed analysis must carry an error message")
        return self

    @classmethod
    def failure(cls, error: str) -> "AnalysisResult":
        return cls(success=False, error=error)

    def to_json(self, path: Path) -> None:
        write_json(path, self.to_dict())

    @classmethod
    def from_json(cls, path: Path) -> "AnalysisResult":
        return cls.model_validate(read_json(path))
