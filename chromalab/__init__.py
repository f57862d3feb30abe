"""
chromalab
=========

Color-space conversion and color-difference math: device RGB variants, CIE
XYZ, CIELAB, CIELUV, their LCh forms, HSV and HSL, with chromatic adaptation,
CIEDE2000, gamut clipping, perceptual mixing and colormaps.

>>> from chromalab import ColorUnitRGB, ColorLab, distance_ciede2000, mix
>>> red = ColorUnitRGB((1.0, 0.0, 0.0))
>>> blue = ColorUnitRGB((0.0, 0.0, 1.0))
>>> purple = mix(red, blue, 0.5)
>>> lab = red.convert(ColorLab)
"""

from .illuminants import Illuminant, DEFAULT_ILLUMINANT
from .errors import ColorError, DomainError, IlluminantMismatchError, GamutUnrepresentableError
from .types import ColorSpace, FormatType

from .colors import (
    ColorBase,
    ColorRGBINT,
    ColorUnitRGB,
    ColorLinearRGB,
    ColorAdobeRGB,
    ColorProPhotoRGB,
    ColorXYZ,
    ColorLab,
    ColorLCHab,
    ColorLuv,
    ColorLCHuv,
    UnitHSV,
    UnitHSL,
    get_color_class,
)
from .conversions import convert, adapt
from .distance import (
    distance_euclidean,
    distance_ciede2000,
    delta_e_cie1976,
    visually_indistinguishable,
)
from .gamut import in_gamut, clip_to_gamut, closest_visible, is_visible
from .gradients import (
    HueMode,
    mix,
    colormap,
    GradientColorMap,
    gradient_scale,
    padded_gradient,
)

__version__ = "0.1.0"

__all__ = [
    # Reference whites
    "Illuminant", "DEFAULT_ILLUMINANT",

    # Errors
    "ColorError", "DomainError", "IlluminantMismatchError", "GamutUnrepresentableError",

    # Enums
    "ColorSpace", "FormatType", "HueMode",

    # Color classes
    "ColorBase",
    "ColorRGBINT", "ColorUnitRGB", "ColorLinearRGB", "ColorAdobeRGB", "ColorProPhotoRGB",
    "ColorXYZ", "ColorLab", "ColorLCHab", "ColorLuv", "ColorLCHuv",
    "UnitHSV", "UnitHSL",
    "get_color_class",

    # Conversion
    "convert", "adapt",

    # Distance
    "distance_euclidean", "distance_ciede2000", "delta_e_cie1976", "visually_indistinguishable",

    # Gamut
    "in_gamut", "clip_to_gamut", "closest_visible", "is_visible",

    # Mixing and colormaps
    "mix", "colormap", "GradientColorMap", "gradient_scale", "padded_gradient",
]
