# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel


class AnalysisConfig(BaseModel):
    min_jawline_points: int = 5
    min_forehead_points: int = 3
    min_lip_points: int = 4


class RenderConfig(BaseModel):
    width: int = 640
    height: int = 480
    midline_extension: float = 50.0
    landmark_radius: int = 2
    font_size: int = 14


class DetectorConfig(BaseModel):
    max_faces: int = 1
    refine_landmarks: bool = True
    min_detection_confidence: float = 0.5


class ReportConfig(BaseModel):
    midline_deviation_deg: float = 2.0


class Config(BaseModel):
    analysis: AnalysisConfig = AnalysisConfig()
    render: RenderConfig = RenderConfig()
    detector: DetectorConfig = DetectorConfig()
    report: ReportConfig = ReportConfig()


def load_config(path: Path | None = None) -> Config:
    load_dotenv()
    path = path or Path(__file__).with_name("config.yaml")
    if path.exists():
        data = yaml.safe_load(path.read_text()) or {}
        cfg = Config(**data)
    else:
        cfg = Config()

    # environment overrides
    width = os.getenv("DENTALAI_CANVAS_WIDTH")
    if width:
        cfg.render.width = int(width)
    height = os.getenv("DENTALAI_CANVAS_HEIGHT")
    if height:
        cfg.render.height = int(height)
    max_faces = os.getenv("DENTALAI_DETECTOR_MAX_FACES")
    if max_faces:
        cfg.detector.max_faces = int(max_faces)
    return cfg
