"""
Color conversions between linear render space and 8-bit display values.
"""

from __future__ import annotations
import math
from typing import Tuple
import numpy as np

from .vec3 import Vec3, Color

# Slightly above 255 so a channel of exactly 1.0 still reaches 255 after
# truncation despite floating point error.
QUANTIZE_SCALE = 255.999

RGB8 = Tuple[int, int, int]


def normal_to_color(normal: Vec3) -> Color:
    """Map a unit normal with components in [-1, 1] to a color in [0, 1]."""
    return (normal + 1.0) * 0.5


def linear_to_gamma(component: float) -> float:
    """Gamma 2 transform of one linear channel; negative values become 0."""
    if component > 0:
        return math.sqrt(component)
    return 0.0


def to_rgb8(color: Color) -> RGB8:
    """Convert a linear color to a gamma-corrected 8-bit RGB triple."""
    return tuple(
        int(min(255.0, max(0.0, QUANTIZE_SCALE * linear_to_gamma(c))))
        for c in color
    )


def to_rgb8_array(linear: np.ndarray) -> np.ndarray:
    """Vectorized `to_rgb8` over an (..., 3) array of linear colors.

    Args:
        linear: Linear color values (float)

    Returns:
        uint8 array of the same shape
    """
    # NaN and non-positive channels map to 0, as in linear_to_gamma
    corrected = np.sqrt(np.where(linear > 0, linear, 0.0))
    return np.clip(np.floor(corrected * QUANTIZE_SCALE), 0, 255).astype(np.uint8)
