"""
Gamut membership and clipping.

Device spaces (RGB, HSV, HSL) are judged against their own channel bounds.
Perceptual spaces are judged by whether the color can be shown on a target
RGB device, or, for ``closest_visible``, whether its chromaticity lies inside
the CIE 1931 spectral locus. Clipping a perceptual color keeps its lightness
and hue and walks its chroma toward the neutral axis.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Tuple, Type

from boundednumbers import clamp
from boundednumbers.functions import cyclic_wrap_float

from .colors.color_base import ColorBase
from .colors.rgb import ColorUnitRGB
from .colors.lab import ColorLab, ColorLCHab
from .colors.luv import ColorLuv, ColorLCHuv
from .colors.xyz import ColorXYZ
from .constants import CLIP_ITERATIONS, GAMUT_TOLERANCE, SPECTRAL_LOCUS_XY
from .conversions.lch import lab_to_lch, luv_to_lch
from .errors import DomainError, GamutUnrepresentableError
from .illuminants import DEFAULT_ILLUMINANT
from .types.format_type import HUE_360

logger = logging.getLogger(__name__)


def _within_bounds(values, bounds, tol: float = GAMUT_TOLERANCE) -> bool:
    return all(lo - tol <= v <= hi + tol for v, (lo, hi) in zip(values, bounds))


def _check_gamut_class(gamut: Type[ColorBase]) -> None:
    if not isinstance(gamut, type) or not issubclass(gamut, ColorBase) or gamut.is_relative:
        raise ValueError(f"gamut must be a device color class such as ColorUnitRGB, got {gamut!r}")


def _representable(value: ColorBase, gamut: Type[ColorBase]) -> bool:
    try:
        device = value.convert(gamut)
    except DomainError:
        # negative lightness or luminance has no device equivalent
        return False
    return _within_bounds(device.value, gamut.bounds)


def in_gamut(value: ColorBase, gamut: Type[ColorBase] = ColorUnitRGB) -> bool:
    """
    Check whether a color is displayable.

    Args:
        value: any color
        gamut: device class perceptual colors are tested against; ignored for
            device-space values, which check their own channel bounds
    Returns:
        True when every channel is within bounds (allowing GAMUT_TOLERANCE)
    """
    _check_gamut_class(gamut)
    if not value.is_relative:
        return _within_bounds(value.value, type(value).bounds)
    return _representable(value, gamut)


# ---------------- spectral locus ----------------

def _inside_locus(x: float, y: float) -> bool:
    """Even-odd ray casting against the closed spectral locus polygon."""
    inside = False
    points = SPECTRAL_LOCUS_XY
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        if (y1 > y) != (y2 > y):
            x_cross = x1 + (y - y1) * (x2 - x1) / (y2 - y1)
            if x < x_cross:
                inside = not inside
    return inside


def is_visible(value: ColorBase) -> bool:
    """
    Check whether a color corresponds to a physically realizable stimulus.

    Black is visible. Other colors need non-negative luminance and a
    chromaticity inside the spectral locus closed by the line of purples.
    """
    try:
        x, y, z = value.to_xyz().value
    except DomainError:
        return False
    if y < -GAMUT_TOLERANCE:
        return False
    total = x + y + z
    if abs(total) <= GAMUT_TOLERANCE:
        return abs(x) <= GAMUT_TOLERANCE and abs(z) <= GAMUT_TOLERANCE
    return _inside_locus(float(x / total), float(y / total))


# ---------------- chroma reduction ----------------

def _polar(value: ColorBase) -> ColorBase:
    """LCh(ab) or LCh(uv) form of ``value`` without passing through XYZ where possible."""
    cls = type(value)
    if cls is ColorLCHab or cls is ColorLCHuv:
        return value
    if cls is ColorLab:
        return ColorLCHab(lab_to_lch(*value.value), illuminant=value.illuminant)
    if cls is ColorLuv:
        return ColorLCHuv(luv_to_lch(*value.value), illuminant=value.illuminant)
    xyz = value.to_xyz()
    x, y, z = xyz.value
    if y < 0.0:
        # imaginary colors below zero luminance are projected from the black plane
        xyz = ColorXYZ((x, 0.0, z), illuminant=xyz.illuminant)
    return xyz.convert(ColorLCHab, illuminant=value.illuminant if value.is_relative else DEFAULT_ILLUMINANT)


def _reduce_chroma(
    value: ColorBase,
    inside: Callable[[ColorBase], bool],
    lightness_range: Tuple[float, float],
    region: str,
) -> ColorBase:
    """
    Bisect on chroma at fixed lightness and hue for the most saturated color
    satisfying ``inside``; the returned value has been tested itself.
    """
    cls = type(value)
    polar = _polar(value)
    polar_cls = type(polar)
    L, c, h = polar.value
    L = float(clamp(L, *lightness_range))

    def candidate(chroma: float) -> ColorBase:
        return polar_cls((L, chroma, h), illuminant=polar.illuminant).convert(
            cls, illuminant=value.illuminant if value.is_relative else None
        )

    best = candidate(0.0)
    # neutral axis is inside every device gamut and the visible locus
    if not inside(best):
        raise GamutUnrepresentableError(
            f"No color with L*={L:.6g} is inside {region}; cannot clip {value!r}"
        )

    full = candidate(c)
    if inside(full):
        return full

    lo, hi = 0.0, c
    for _ in range(CLIP_ITERATIONS):
        mid = (lo + hi) / 2.0
        probe = candidate(mid)
        if inside(probe):
            lo, best = mid, probe
        else:
            hi = mid
    logger.debug("Reduced chroma of %r from %.6g to %.6g to fit %s", value, c, lo, region)
    return best


def clip_to_gamut(value: ColorBase, gamut: Type[ColorBase] = ColorUnitRGB) -> ColorBase:
    """
    Bring a color into gamut.

    RGB values are clamped per channel; HSV/HSL wrap the hue and clamp the
    other channels. Perceptual values get lightness clamped to [0, 100] and
    chroma reduced at constant lightness and hue until representable in
    ``gamut``. In-gamut input is returned as is.

    Raises:
        GamutUnrepresentableError: not even the neutral color at the clamped
            lightness fits
    """
    if in_gamut(value, gamut):
        return value

    cls = type(value)
    if not cls.is_relative:
        channels = []
        for i, (v, (lo, hi)) in enumerate(zip(value.value, cls.bounds)):
            if i == cls.hue_index:
                channels.append(float(cyclic_wrap_float(v, 0.0, HUE_360)))
            else:
                channels.append(float(clamp(v, lo, hi)))
        return cls(tuple(channels))

    return _reduce_chroma(
        value,
        lambda color: _representable(color, gamut),
        (0.0, 100.0),
        gamut.__name__,
    )


def closest_visible(value: ColorBase) -> ColorBase:
    """
    Nearest physically realizable color at the same lightness and hue.

    Visible input is returned as is. The result keeps ``value``'s class and
    illuminant.
    """
    if is_visible(value):
        return value
    return _reduce_chroma(value, is_visible, (0.0, math.inf), "the visible locus")
