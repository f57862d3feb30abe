"""
Color difference metrics.

``distance_ciede2000`` follows G. Sharma, W. Wu and E. N. Dalal, "The
CIEDE2000 color-difference formula: implementation notes, supplementary test
data, and mathematical observations", Color Res. Appl. 30 (2005).
"""
from __future__ import annotations

import math
from typing import Optional, Tuple, Union

from .colors.color_base import ColorBase
from .colors.color import shared_illuminant
from .colors.lab import ColorLab
from .constants import CHROMA_EPSILON, JND_THRESHOLD
from .conversions.wrapper import ColorTarget, resolve_color_class
from .illuminants import Illuminant
from .types.color_types import ColorSpace
from .utils.hue import normalize_hue, hue_difference

IlluminantLike = Union[Illuminant, str]

_POW25_7 = 25.0 ** 7
# Exactly opposite hues count as the short arc whatever the rounding of atan2
_HUE_TIE = 1e-9


def distance_euclidean(
    a: ColorBase,
    b: ColorBase,
    space: ColorTarget = ColorSpace.LAB,
    *,
    illuminant: Optional[IlluminantLike] = None,
) -> float:
    """
    Straight-line distance between two colors in ``space``.

    Hue channels contribute the short-path angular difference, so hues 350
    and 10 are 20 degrees apart.

    Raises:
        IlluminantMismatchError: relative inputs with different whites and no
            ``illuminant`` argument
    """
    white = shared_illuminant(a, b, illuminant)
    cls = resolve_color_class(space)
    va = a.convert(cls, illuminant=white).value
    vb = b.convert(cls, illuminant=white).value

    total = 0.0
    for i, (x, y) in enumerate(zip(va, vb)):
        d = hue_difference(x, y) if i == cls.hue_index else y - x
        total += d * d
    return math.sqrt(total)


def delta_e_cie1976(a: ColorBase, b: ColorBase, *, illuminant: Optional[IlluminantLike] = None) -> float:
    """CIE 1976 color difference: Euclidean distance in CIELAB."""
    return distance_euclidean(a, b, ColorSpace.LAB, illuminant=illuminant)


def _hue_prime(a: float, b: float) -> float:
    if a == 0.0 and b == 0.0:
        return 0.0
    return normalize_hue(math.degrees(math.atan2(b, a)))


def ciede2000(
    lab1: Tuple[float, float, float],
    lab2: Tuple[float, float, float],
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0,
) -> float:
    """CIEDE2000 between two raw (L*, a*, b*) triples."""
    # Fixed argument order makes the result exactly symmetric in floating point
    if lab1 > lab2:
        lab1, lab2 = lab2, lab1
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1p = (1.0 + g) * a1
    a2p = (1.0 + g) * a2
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    h1p = _hue_prime(a1p, b1)
    h2p = _hue_prime(a2p, b2)
    c_product = c1p * c2p
    achromatic = c_product < CHROMA_EPSILON

    delta_lp = L2 - L1
    delta_cp = c2p - c1p
    delta_hp = 0.0 if achromatic else hue_difference(h1p, h2p)
    delta_big_hp = 2.0 * math.sqrt(c_product) * math.sin(math.radians(delta_hp) / 2.0)

    l_bar_p = (L1 + L2) / 2.0
    c_bar_p = (c1p + c2p) / 2.0
    if achromatic:
        h_bar_p = h1p + h2p
    elif abs(h1p - h2p) <= 180.0 + _HUE_TIE:
        h_bar_p = (h1p + h2p) / 2.0
    elif h1p + h2p < 360.0:
        h_bar_p = (h1p + h2p + 360.0) / 2.0
    else:
        h_bar_p = (h1p + h2p - 360.0) / 2.0

    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar_p - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar_p))
        + 0.32 * math.cos(math.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar_p - 63.0))
    )
    delta_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    c_bar_p7 = c_bar_p ** 7
    r_c = 2.0 * math.sqrt(c_bar_p7 / (c_bar_p7 + _POW25_7))
    l_offset = (l_bar_p - 50.0) ** 2
    s_l = 1.0 + 0.015 * l_offset / math.sqrt(20.0 + l_offset)
    s_c = 1.0 + 0.045 * c_bar_p
    s_h = 1.0 + 0.015 * c_bar_p * t
    r_t = -math.sin(math.radians(2.0 * delta_theta)) * r_c

    dl = delta_lp / (kl * s_l)
    dc = delta_cp / (kc * s_c)
    dh = delta_big_hp / (kh * s_h)
    return math.sqrt(max(0.0, dl * dl + dc * dc + dh * dh + r_t * dc * dh))


def distance_ciede2000(
    a: ColorBase,
    b: ColorBase,
    *,
    illuminant: Optional[IlluminantLike] = None,
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0,
) -> float:
    """
    CIEDE2000 color difference.

    Both colors are converted to CIELAB under a shared white (see
    ``shared_illuminant``). ``kl``, ``kc`` and ``kh`` are the parametric
    weighting factors, all 1 under reference conditions.
    """
    white = shared_illuminant(a, b, illuminant)
    lab1 = a.convert(ColorLab, illuminant=white).value
    lab2 = b.convert(ColorLab, illuminant=white).value
    return ciede2000(lab1, lab2, kl, kc, kh)


def visually_indistinguishable(
    a: ColorBase,
    b: ColorBase,
    *,
    illuminant: Optional[IlluminantLike] = None,
    threshold: float = JND_THRESHOLD,
) -> bool:
    """True when the CIEDE2000 difference is at most one just-noticeable difference."""
    return distance_ciede2000(a, b, illuminant=illuminant) <= threshold
