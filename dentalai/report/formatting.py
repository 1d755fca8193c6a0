# SPDX-License-Identifier: Apache-2.0
"""Flatten analysis results into the records handed to the storage layer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dentalai.report.recommendations import generate_recommendations
from dentalai.schemas import AnalysisResult


def _iso(ts: Optional[datetime]) -> str:
    ts = ts or datetime.now(timezone.utc)
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_for_storage(result: Optional[AnalysisResult], timestamp: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
    """Return the persisted shape of *result*, or ``None`` if it failed.

    Numbers are copied as they are; nothing is rounded.
    """
    if result is None or not result.success:
        return None

    midline = result.midline
    shape = result.face_shape
    props = result.dental_proportions
    return {
        "midline": {
            "angle": midline.angle,
            "confidence": midline.confidence,
        },
        "faceShape": {
            "shape": shape.shape.value,
            "ratio": shape.ratio,
            "confidence": shape.confidence,
        },
        "dentalProportions": {
            "centralIncisorsWidth": props.central_incisors_width,
            "lateralIncisorsWidth": props.lateral_incisors_width,
            "caninesWidth": props.canines_width,
            "confidence": props.confidence,
        },
        "timestamp": _iso(timestamp),
    }


def to_bite_analysis_row(
    result: Optional[AnalysisResult],
    image_url: str,
    user_id: Optional[str] = None,
    dental_analysis_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Optional[Dict[str, Any]]:
    """Build a ``bite_analyses`` table row, recommendations included.

    ``dental_analysis_id`` links the row to the colour analysis of the same
    photo when there is one.
    """
    if result is None or not result.success:
        return None

    row: Dict[str, Any] = {
        "image_url": image_url,
        "midline_angle": result.midline.angle,
        "midline_confidence": result.midline.confidence,
        "face_shape": result.face_shape.shape.value,
        "face_shape_confidence": result.face_shape.confidence,
        "central_incisors_width": result.dental_proportions.central_incisors_width,
        "lateral_incisors_width": result.dental_proportions.lateral_incisors_width,
        "canines_width": result.dental_proportions.canines_width,
        "proportions_confidence": result.dental_proportions.confidence,
        "recommendations": generate_recommendations(result),
        "created_at": _iso(timestamp),
    }
    if user_id is not None:
        row["user_id"] = user_id
    if dental_analysis_id is not None:
        row["dental_analysis_id"] = dental_analysis_id
    return row
