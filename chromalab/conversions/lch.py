"""Cartesian <-> polar (chroma, hue) for the CIE opponent axes."""
import math
from typing import Tuple

from ..constants import CHROMA_EPSILON
from ..utils.hue import normalize_hue


def to_polar(a: float, b: float) -> Tuple[float, float]:
    """
    (a, b) or (u, v) -> (chroma, hue in degrees).

    Chroma below CHROMA_EPSILON gets hue 0 so that grays are stable.
    """
    c = math.hypot(a, b)
    if c < CHROMA_EPSILON:
        return c, 0.0
    return c, normalize_hue(math.degrees(math.atan2(b, a)))


def from_polar(c: float, h: float) -> Tuple[float, float]:
    """(chroma, hue in degrees) -> (a, b) or (u, v)."""
    rad = math.radians(h)
    return c * math.cos(rad), c * math.sin(rad)


def lab_to_lch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    c, h = to_polar(a, b)
    return L, c, h


def lch_to_lab(L: float, c: float, h: float) -> Tuple[float, float, float]:
    a, b = from_polar(c, h)
    return L, a, b


# Same geometry for L*u*v*
luv_to_lch = lab_to_lch
lch_to_luv = lch_to_lab
