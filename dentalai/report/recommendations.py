# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Dict, List, Optional

from dentalai.schemas import AnalysisResult, Shape
from dentalai.utils.text import to_fixed

MIDLINE_DEVIATION_DEG = 2.0

FACE_SHAPE_ADVICE: Dict[Shape, str] = {
    Shape.ROUND: "Para rostos redondos, dentes anteriores mais longos e retangulares criam ilusão de alongamento facial.",
    Shape.SQUARE: "Para rostos quadrados, dentes com cantos arredondados suavizam as linhas faciais.",
    Shape.LONG: "Para rostos longos, dentes mais largos e menos alongados equilibram as proporções faciais.",
    Shape.OVAL: "Para rostos ovais, manter proporções áureas entre os dentes anteriores para harmonia facial.",
}


def generate_recommendations(
    result: Optional[AnalysisResult],
    deviation_threshold: float = MIDLINE_DEVIATION_DEG,
) -> List[str]:
    """Advice sentences in a fixed order: face shape, midline tilt, tooth widths."""
    if result is None or not result.success:
        return []

    recommendations: List[str] = []
    advice = FACE_SHAPE_ADVICE.get(result.face_shape.shape)
    if advice:
        recommendations.append(advice)

    angle = result.midline.angle
    if abs(angle) > deviation_threshold:
        recommendations.append(
            f"Linha média facial com inclinação de {to_fixed(angle)}°. "
            "Considerar ajuste na orientação dos dentes anteriores."
        )

    props = result.dental_proportions
    recommendations.append(f"Largura ideal para incisivos centrais: {to_fixed(props.central_incisors_width)}mm.")
    recommendations.append(f"Largura ideal para incisivos laterais: {to_fixed(props.lateral_incisors_width)}mm.")
    return recommendations
