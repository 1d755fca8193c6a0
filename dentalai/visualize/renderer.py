# SPDX-License-Identifier: Apache-2.0
"""Drawing surfaces for the analysis overlay."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from dentalai.utils.io import ensure_dir

Color = Tuple[int, int, int, int]
XY = Tuple[float, float]


def rgba(r: int, g: int, b: int, a: float = 1.0) -> Color:
    """CSS-style colour with a 0..1 alpha."""
    return (r, g, b, int(round(a * 255)))


class Renderer(Protocol):
    """Fixed-size 2D surface. Not safe for concurrent use."""

    width: int
    height: int

    def clear(self) -> None: ...

    def draw_image(self, image, x: float, y: float, w: float, h: float) -> None: ...

    def draw_polyline(self, points: Sequence[XY], color: Color, width: float) -> None: ...

    def draw_points(self, points: Sequence[XY], radius: float, color: Color) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color, width: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, color: Color, size: int) -> None: ...


class PillowRenderer:
    """Renderer backed by a Pillow RGBA image.

    Every primitive is drawn on its own transparent layer and alpha-composited,
    so translucent colours blend with what is underneath.
    """

    def __init__(self, width: int = 640, height: int = 480):
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    def _layer(self) -> Tuple[Image.Image, ImageDraw.ImageDraw]:
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        return layer, ImageDraw.Draw(layer)

    def _compose(self, layer: Image.Image) -> None:
        self.image.alpha_composite(layer)

    def clear(self) -> None:
        self.image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    def draw_image(self, image, x: float, y: float, w: float, h: float) -> None:
        if not isinstance(image, Image.Image):
            image = Image.fromarray(image)
        src = image.convert("RGBA").resize((int(round(w)), int(round(h))))
        self.image.alpha_composite(src, dest=(int(round(x)), int(round(y))))

    def draw_polyline(self, points: Sequence[XY], color: Color, width: float) -> None:
        if len(points) < 2:
            return
        layer, draw = self._layer()
        draw.line([tuple(p) for p in points], fill=color, width=max(1, int(round(width))))
        self._compose(layer)

    def draw_points(self, points: Sequence[XY], radius: float, color: Color) -> None:
        layer, draw = self._layer()
        for px, py in points:
            draw.ellipse([px - radius, py - radius, px + radius, py + radius], fill=color)
        self._compose(layer)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        if w <= 0 or h <= 0:
            return
        layer, draw = self._layer()
        draw.rectangle([x, y, x + w, y + h], fill=color)
        self._compose(layer)

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color, width: float) -> None:
        if w <= 0 or h <= 0:
            return
        layer, draw = self._layer()
        draw.rectangle([x, y, x + w, y + h], outline=color, width=max(1, int(round(width))))
        self._compose(layer)

    def draw_text(self, text: str, x: float, y: float, color: Color, size: int) -> None:
        layer, draw = self._layer()
        font = ImageFont.load_default(size=size)
        # y is the text baseline, as on an HTML canvas
        draw.text((x, y - size), text, fill=color, font=font)
        self._compose(layer)

    def save(self, path: Path) -> Path:
        path = Path(path)
        ensure_dir(path.parent)
        self.image.convert("RGB").save(path)
        return path
