from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Channels = Tuple[float, float, float]
XYZTuple = Tuple[float, float, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    LINEAR_RGB = "linear_rgb"
    ADOBE_RGB = "adobe_rgb"
    PROPHOTO_RGB = "prophoto_rgb"
    XYZ = "xyz"
    LAB = "lab"
    LUV = "luv"
    LCHAB = "lchab"
    LCHUV = "lchuv"
    HSV = "hsv"
    HSL = "hsl"


ColorSpaceLike = Union[ColorSpace, str]

HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL, ColorSpace.LCHAB, ColorSpace.LCHUV}


def to_color_space(space: ColorSpaceLike) -> ColorSpace:
    """
    Normalize a color space name or enum member.

    Args:
        space: ColorSpace member or its string value (case-insensitive)
    Returns:
        The matching ColorSpace member
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(space.lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None

