# SPDX-License-Identifier: Apache-2.0
"""DentalAI bite analysis package."""

from __future__ import annotations

from dentalai.analyze.engine import BiteAnalyzer
from dentalai.report.formatting import format_for_storage, to_bite_analysis_row
from dentalai.report.recommendations import generate_recommendations
from dentalai.visualize.overlay import BiteAnalysisVisualizer

__all__ = [
    "BiteAnalyzer",
    "BiteAnalysisVisualizer",
    "format_for_storage",
    "generate_recommendations",
    "to_bite_analysis_row",
]
__version__ = "0.1.0"
