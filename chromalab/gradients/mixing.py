from __future__ import annotations

import math
import warnings
from enum import IntEnum
from typing import Optional, Union

from boundednumbers import clamp

from ..colors.color_base import ColorBase
from ..colors.color import shared_illuminant
from ..conversions.wrapper import ColorTarget, resolve_color_class
from ..illuminants import Illuminant
from ..types.color_types import ColorSpace, Channels
from ..types.format_type import HUE_360
from ..utils.hue import normalize_hue, hue_difference


class HueMode(IntEnum):
    """
    Hue interpolation modes for cyclical color spaces.

    CW:       Clockwise (increasing hue direction)
    CCW:      Counterclockwise (decreasing hue direction)
    SHORTEST: Shortest path (<=180 degree arc) - most common
    LONGEST:  Longest path (>=180 degree arc)
    """
    CW = 0
    CCW = 1
    SHORTEST = 2
    LONGEST = 3


def hue_delta(h0: float, h1: float, hue_mode: HueMode = HueMode.SHORTEST) -> float:
    """Signed angle travelled from ``h0`` to ``h1`` under ``hue_mode``."""
    h0 = normalize_hue(h0)
    h1 = normalize_hue(h1)

    if hue_mode == HueMode.CW:
        if h1 < h0:
            h1 += HUE_360
    elif hue_mode == HueMode.CCW:
        if h1 > h0:
            h1 -= HUE_360
    elif hue_mode == HueMode.SHORTEST:
        return hue_difference(h0, h1)
    elif hue_mode == HueMode.LONGEST:
        delta = hue_difference(h0, h1)
        if delta > 0.0:
            return delta - HUE_360
        if delta < 0.0:
            return delta + HUE_360
        return 0.0
    else:
        raise ValueError(f"Unknown hue mode: {hue_mode!r}")
    return h1 - h0


def hue_lerp(h0: float, h1: float, t: float, hue_mode: HueMode = HueMode.SHORTEST) -> float:
    """Interpolate between two hue angles, wrapping the result into [0, 360)."""
    return normalize_hue(h0 + t * hue_delta(h0, h1, hue_mode))


def lerp_channels(
    start: ColorBase,
    end: ColorBase,
    t: float,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> Channels:
    """
    Channel-wise interpolation of two colors of the same class.

    The hue channel follows ``hue_mode``; an achromatic endpoint takes the
    other endpoint's hue so that mixing with gray does not sweep hues.
    """
    hue_index = type(start).hue_index
    va, vb = start.value, end.value
    out = []
    for i, (x, y) in enumerate(zip(va, vb)):
        if i != hue_index:
            out.append(x + (y - x) * t)
            continue
        if start.is_achromatic and not end.is_achromatic:
            x = y
        elif end.is_achromatic and not start.is_achromatic:
            y = x
        out.append(hue_lerp(x, y, t, hue_mode))
    return tuple(out)  # type: ignore[return-value]


def _checked_weight(weight: float) -> float:
    weight = float(weight)
    if not math.isfinite(weight):
        raise ValueError(f"mix weight must be finite, got {weight!r}")
    if weight < 0.0 or weight > 1.0:
        warnings.warn(f"mix weight {weight} outside [0, 1]; clamping", UserWarning, stacklevel=3)
        weight = float(clamp(weight, 0.0, 1.0))
    return weight


def convert_like(color: ColorBase, like: ColorBase) -> ColorBase:
    """Convert ``color`` to the class and illuminant of ``like``."""
    return color.convert(type(like), illuminant=like.illuminant if like.is_relative else None)


def mix(
    a: ColorBase,
    b: ColorBase,
    weight: float = 0.5,
    space: ColorTarget = ColorSpace.LAB,
    *,
    illuminant: Optional[Union[Illuminant, str]] = None,
    hue_mode: HueMode = HueMode.SHORTEST,
) -> ColorBase:
    """
    Blend two colors.

    Args:
        a: first color; the result has its class and illuminant
        b: second color
        weight: share of ``b`` in the blend; 0 gives ``a``, 1 gives ``b``
            converted to ``a``'s class. Clamped to [0, 1] with a warning.
        space: space in which channels are interpolated (default CIELAB)
        illuminant: common white for relative inputs with different whites
        hue_mode: hue path for polar interpolation spaces
    Raises:
        IlluminantMismatchError: relative inputs with different whites and no
            ``illuminant`` argument
    """
    weight = _checked_weight(weight)
    white = shared_illuminant(a, b, illuminant)

    if weight == 0.0:
        return a
    if weight == 1.0:
        return convert_like(b, a)

    cls = resolve_color_class(space)
    start = a.convert(cls, illuminant=white)
    end = b.convert(cls, illuminant=white)
    mixed = cls(lerp_channels(start, end, weight, hue_mode), illuminant=start.illuminant if cls.is_relative else None)
    return convert_like(mixed, a)
