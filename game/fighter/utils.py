"""
Geometry helpers for clamping and collision tests
"""

from __future__ import annotations

from typing import Tuple

# (x, y, width, height), top-left origin
Box = Tuple[float, float, float, float]


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def box(x: float, y: float, w: float, h: float) -> Box:
    return (x, y, w, h)


def overlaps(a: Box, b: Box) -> bool:
    """
    Check if two axis-aligned boxes intersect.
    Strict on every axis: boxes that only share an edge do not collide.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by
