"""
Toolkit-agnostic geometry for position surfaces.

Pointer offsets are clamped into the surface, indicator ratios are range
checked, and reported positions can be turned back into fractions.
"""
from __future__ import annotations
import math
from typing import Optional


def clamp_position(x: float, width: int) -> int:
    """
    Clamp a horizontal pixel offset into [0, width].

    Fractional offsets are truncated toward zero first. A surface without
    width always yields 0.
    """
    if width <= 0:
        return 0
    return max(0, min(int(x), width))


def is_visible_ratio(ratio: float) -> bool:
    """True if the ratio places an indicator, i.e. it is finite and in [0, 1]."""
    try:
        value = float(ratio)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and 0.0 <= value <= 1.0


def indicator_x(ratio: float, width: int) -> Optional[int]:
    """
    Pixel column of the indicator line.

    Returns:
        floor(ratio * width), or None when the indicator is hidden
    """
    if not is_visible_ratio(ratio):
        return None
    return math.floor(float(ratio) * max(0, width))


def position_to_ratio(position: int, total_width: int) -> float:
    """Convert a reported (position, total_width) pair into a fraction in [0, 1]."""
    if total_width <= 0:
        return 0.0
    return max(0.0, min(1.0, position / total_width))
