# SPDX-License-Identifier: Apache-2.0
"""Synthetic sample data generator."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List

import numpy as np
from PIL import Image, ImageDraw

from dentalai.utils.io import write_json


def make_keypoints(width: int = 640, height: int = 480, jitter: float = 0.0, seed: int = 1337) -> List[Dict[str, float]]:
    """Frontal face keypoints in the naming scheme the analyzer expects."""
    rng = np.random.default_rng(seed)
    cx = width / 2
    fw = 0.35 * width
    jaw_y, chin_y = 0.5 * height, 0.8 * height
    t = np.linspace(0.0, np.pi, 9)

    points: List[tuple] = []
    for i, a in enumerate(t):
        points.append((f"jawline_{i}", cx - fw / 2 * np.cos(a), jaw_y + (chin_y - jaw_y) * np.sin(a)))
    for i, a in enumerate(np.linspace(0.0, np.pi, 5)):
        points.append((f"forehead_{i}", cx - 0.4 * fw * np.cos(a), 0.3 * height - 0.08 * height * np.sin(a)))
    points += [
        ("foreheadCenter", cx, 0.22 * height),
        ("noseTip", cx, 0.58 * height),
        ("chin", cx, chin_y),
        ("lipCornerLeft", cx - 0.18 * fw, 0.68 * height),
        ("lipCornerRight", cx + 0.18 * fw, 0.68 * height),
    ]
    for side, sign in (("leftEye", 1), ("rightEye", -1)):
        ex, ey = cx + sign * 0.2 * fw, 0.42 * height
        for i, (dx, dy) in enumerate([(-12, 0), (0, -5), (12, 0), (0, 5)]):
            points.append((f"{side}_{i}", ex + dx, ey + dy))
    for i, dy in enumerate([0.46, 0.5, 0.54]):
        points.append((f"nose_{i}", cx, dy * height))
    for i, (dx, dy) in enumerate([(-20, 0), (0, -4), (20, 0), (0, 4)]):
        points.append((f"mouth_{i}", cx + dx, 0.68 * height + dy))
    for i, (dx, dy) in enumerate([(-30, 0), (-15, -10), (0, -8), (15, -10), (30, 0), (0, 12)]):
        points.append((f"lips_{i}", cx + dx, 0.68 * height + dy))

    out = []
    for name, x, y in points:
        if jitter:
            x, y = np.array([x, y]) + rng.normal(0.0, jitter, 2)
        out.append({"name": name, "x": float(x), "y": float(y)})
    return out


def make_image(width: int = 640, height: int = 480) -> Image.Image:
    img = Image.new("RGB", (width, height), (128, 128, 128))
    draw = ImageDraw.Draw(img)
    cx, fw = width / 2, 0.35 * width
    draw.ellipse([cx - fw / 2, 0.18 * height, cx + fw / 2, 0.82 * height], fill=(224, 188, 160))
    return img


def make_sample(out: Path, seed: int = 1337, jitter: float = 0.0) -> Path:
    out.mkdir(parents=True, exist_ok=True)
    write_json(out / "keypoints.json", {"keypoints": make_keypoints(jitter=jitter, seed=seed)})
    make_image().save(out / "image.png")
    return out


def main() -> None:  # pragma: no cover
    parser = argparse.ArgumentParser()
    parser.add_argument("--out", type=Path, required=True)
    parser.add_argument("--seed", type=int, default=1337)
    parser.add_argument("--jitter", type=float, default=0.0)
    args = parser.parse_args()
    make_sample(args.out, args.seed, args.jitter)


if __name__ == "__main__":  # pragma: no cover
    main()
