# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised inside the analysis core.

They never cross the analyzer boundary: :class:`~dentalai.analyze.engine.BiteAnalyzer`
turns them into unsuccessful :class:`~dentalai.schemas.AnalysisResult` objects.
"""

from __future__ import annotations


class BiteAnalysisError(Exception):
    """Base class for bite analysis failures."""


class InsufficientLandmarksError(BiteAnalysisError):
    """A required landmark group is missing from the keypoint set."""

    def __init__(self, group: str):
        super().__init__(f"no keypoints found for group '{group}'")
        self.group = group


class DetectorError(BiteAnalysisError):
    """The landmark detector could not be created or failed to run."""
