"""
Hexagonal HSV and HSL projections of gamma-encoded RGB.

The RGB cube is tilted onto its gray diagonal and projected into a hexagon:
chroma is the largest channel minus the smallest, and hue is the position
along the hexagon's perimeter expressed in degrees. Grays have hue 0.
"""
from typing import Tuple

from ..constants import CHROMA_EPSILON
from ..utils.hue import normalize_hue


def _hexagon_hue(r: float, g: float, b: float, max_c: float, chroma: float) -> float:
    if chroma < CHROMA_EPSILON:
        return 0.0
    if max_c == r:
        h = ((g - b) / chroma) % 6.0
    elif max_c == g:
        h = (b - r) / chroma + 2.0
    else:
        h = (r - g) / chroma + 4.0
    return normalize_hue(60.0 * h)


def _hexagon_rgb(h: float, chroma: float) -> Tuple[float, float, float]:
    """Point on the hexagon for hue ``h`` with the smallest channel at zero."""
    hp = normalize_hue(h) / 60.0
    x = chroma * (1.0 - abs(hp % 2.0 - 1.0))
    sector = int(hp) % 6
    if sector == 0:
        return chroma, x, 0.0
    if sector == 1:
        return x, chroma, 0.0
    if sector == 2:
        return 0.0, chroma, x
    if sector == 3:
        return 0.0, x, chroma
    if sector == 4:
        return x, 0.0, chroma
    return chroma, 0.0, x


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB (0..1) to HSV.

    Returns:
        h in [0, 360), s in [0, 1], v in [0, 1] for in-gamut input
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    h = _hexagon_hue(r, g, b, max_c, chroma)
    s = 0.0 if max_c == 0.0 else chroma / max_c
    return h, s, max_c


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    chroma = v * s
    r1, g1, b1 = _hexagon_rgb(h, chroma)
    m = v - chroma
    return r1 + m, g1 + m, b1 + m


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB (0..1) to HSL.

    Lightness is the mean of the largest and smallest channels, giving the
    double hexcone; saturation is 0 at black and white.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    chroma = max_c - min_c

    h = _hexagon_hue(r, g, b, max_c, chroma)
    lightness = (max_c + min_c) / 2.0
    denom = 1.0 - abs(2.0 * lightness - 1.0)
    s = 0.0 if denom < CHROMA_EPSILON else chroma / denom
    return h, s, lightness


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    r1, g1, b1 = _hexagon_rgb(h, chroma)
    m = l - chroma / 2.0
    return r1 + m, g1 + m, b1 + m


def hsv_to_hsl(h: float, s: float, v: float) -> Tuple[float, float, float]:
    l = v * (1.0 - s / 2.0)
    denom = min(l, 1.0 - l)
    s_l = 0.0 if denom < CHROMA_EPSILON else (v - l) / denom
    return h, s_l, l


def hsl_to_hsv(h: float, s: float, l: float) -> Tuple[float, float, float]:
    v = l + s * min(l, 1.0 - l)
    s_v = 0.0 if v < CHROMA_EPSILON else 2.0 * (1.0 - l / v)
    return h, s_v, v
