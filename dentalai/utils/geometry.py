# SPDX-License-Identifier: Apache-2.0
"""Planar geometry on ``(N, 2)`` point arrays."""

from __future__ import annotations

import numpy as np


def as_points(points) -> np.ndarray:
    """Return *points* as a float array of shape ``(N, 2)``."""
    arr = np.asarray(points, dtype=float)
    return arr.reshape(-1, 2)


def centroid(points: np.ndarray) -> np.ndarray:
    """Arithmetic mean position of a non-empty point group."""
    pts = as_points(points)
    if len(pts) == 0:
        raise ValueError("centroid of an empty point group is undefined")
    return pts.mean(axis=0)


def midpoint(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return (np.asarray(a, dtype=float) + np.asarray(b, dtype=float)) / 2.0


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.hypot(*(np.asarray(b, dtype=float) - np.asarray(a, dtype=float))))


def horizontal_extent(points: np.ndarray) -> float:
    """Spread of the x coordinates; 0 for fewer than two points."""
    pts = as_points(points)
    if len(pts) < 2:
        return 0.0
    return float(pts[:, 0].max() - pts[:, 0].min())


def lowest_point(points: np.ndarray) -> np.ndarray:
    """Point with the largest y (image coordinates grow downwards).

    Ties resolve to the first point in input order.
    """
    pts = as_points(points)
    return pts[int(np.argmax(pts[:, 1]))]


def angle_deg(a: np.ndarray, b: np.ndarray) -> float:
    """Direction of the vector ``a -> b`` in degrees, as ``atan2(dy, dx)``."""
    dx, dy = np.asarray(b, dtype=float) - np.asarray(a, dtype=float)
    return float(np.degrees(np.arctan2(dy, dx)))
