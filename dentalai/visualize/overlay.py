# SPDX-License-Identifier: Apache-2.0
"""Annotated overlay of a bite analysis on the source photo."""

from __future__ import annotations

import math
from typing import List, Optional

from dentalai.config import RenderConfig
from dentalai.schemas import AnalysisResult, DentalProportions, Keypoint, Midline
from dentalai.utils.text import percent, to_fixed
from dentalai.visualize.renderer import Renderer, rgba

MIDLINE_COLOR = rgba(0, 255, 0, 0.8)
MIDLINE_EXTENSION_COLOR = rgba(0, 255, 0, 0.4)
LANDMARK_COLOR = rgba(255, 0, 0, 0.5)
CENTRAL_COLOR = rgba(255, 255, 255, 0.7)
LATERAL_COLOR = rgba(245, 245, 245, 0.7)
CANINE_COLOR = rgba(235, 235, 235, 0.7)
BAND_OUTLINE_COLOR = rgba(0, 0, 255, 0.5)
INFO_BOX_COLOR = rgba(0, 0, 0, 0.7)
TEXT_COLOR = rgba(255, 255, 255)


class BiteAnalysisVisualizer:
    """Paint an image and its analysis onto a :class:`Renderer`.

    The visualizer owns the renderer for the duration of :meth:`render` and
    never modifies the analysis result.
    """

    def __init__(self, renderer: Renderer, config: Optional[RenderConfig] = None):
        self.renderer = renderer
        self.config = config or RenderConfig()

    def render(self, image, result: Optional[AnalysisResult]) -> None:
        r = self.renderer
        r.clear()
        r.draw_image(image, 0, 0, r.width, r.height)
        if result is None or not result.success:
            return
        self.draw_midline(result.midline)
        self.draw_landmarks(result.landmarks)
        self.draw_dental_proportions(result.dental_proportions)
        self.draw_info_text(result)

    def draw_midline(self, midline: Optional[Midline]) -> None:
        if midline is None or len(midline.points) < 2:
            return
        points = [(p.x, p.y) for p in midline.points]
        self.renderer.draw_polyline(points, MIDLINE_COLOR, 2)

        ext = self.config.midline_extension
        angle = math.radians(midline.angle)
        dx, dy = math.cos(angle) * ext, math.sin(angle) * ext
        (fx, fy), (lx, ly) = points[0], points[-1]
        self.renderer.draw_polyline([(fx - dx, fy - dy), (lx + dx, ly + dy)], MIDLINE_EXTENSION_COLOR, 1)

    def draw_landmarks(self, landmarks: Optional[List[Keypoint]]) -> None:
        if not landmarks:
            return
        self.renderer.draw_points([(kp.x, kp.y) for kp in landmarks], self.config.landmark_radius, LANDMARK_COLOR)

    def draw_dental_proportions(self, proportions: Optional[DentalProportions]) -> None:
        """Ideal tooth band at 70% of the surface height, mirrored about the centre."""
        if proportions is None:
            return
        r = self.renderer
        y = r.height * 0.7
        cx = r.width / 2
        central = proportions.central_incisors_width
        lateral = proportions.lateral_incisors_width
        canine = proportions.canines_width

        # both central incisors as one block
        r.fill_rect(cx - central, y - 20, central * 2, 20, CENTRAL_COLOR)
        r.fill_rect(cx - central - lateral, y - 18, lateral, 18, LATERAL_COLOR)
        r.fill_rect(cx + central, y - 18, lateral, 18, LATERAL_COLOR)
        r.fill_rect(cx - central - lateral - canine, y - 19, canine, 19, CANINE_COLOR)
        r.fill_rect(cx + central + lateral, y - 19, canine, 19, CANINE_COLOR)

        half = central + lateral + canine
        r.stroke_rect(cx - half, y - 20, half * 2, 20, BAND_OUTLINE_COLOR, 1)

    def draw_info_text(self, result: AnalysisResult) -> None:
        r = self.renderer
        size = self.config.font_size
        r.fill_rect(10, 10, 300, 100, INFO_BOX_COLOR)

        shape = result.face_shape
        props = result.dental_proportions
        lines = [
            f"Formato do rosto: {shape.shape.value}",
            f"Confiança: {percent(shape.confidence)}%",
            f"Incisivos centrais: {to_fixed(props.central_incisors_width)}mm",
            f"Incisivos laterais: {to_fixed(props.lateral_incisors_width)}mm",
        ]
        for i, line in enumerate(lines):
            r.draw_text(line, 20, 30 + 20 * i, TEXT_COLOR, size)
