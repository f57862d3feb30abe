"""
Scalar color-space formulas and the generic converter.

The formula modules work on plain float triples and know nothing about color
classes; ``convert`` routes a color object through CIE XYZ.

Formula modules
---------------
companding   sRGB / gamma / ProPhoto transfer functions
rgb_xyz      RGB working spaces and the RGB <-> XYZ matrix step
lab, luv     CIE 1976 L*a*b* and L*u*v* <-> XYZ
lch          Cartesian <-> polar for the opponent axes
hsv          hexagonal HSV / HSL <-> encoded RGB
adaptation   chromatic adaptation between reference whites
"""

from .companding import srgb_to_linear, linear_to_srgb
from .rgb_xyz import (
    RGBWorkingSpace,
    SRGB,
    LINEAR_SRGB,
    ADOBE_RGB,
    PROPHOTO_RGB,
    rgb_to_xyz,
    xyz_to_rgb,
)
from .lab import xyz_to_lab, lab_to_xyz
from .luv import xyz_to_luv, luv_to_xyz
from .lch import lab_to_lch, lch_to_lab, luv_to_lch, lch_to_luv
from .hsv import (
    unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    unit_rgb_to_hsl,
    hsl_to_unit_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
)
from .adaptation import adapt, adaptation_matrix, AdaptationMethod
from .wrapper import convert

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',

    'RGBWorkingSpace',
    'SRGB',
    'LINEAR_SRGB',
    'ADOBE_RGB',
    'PROPHOTO_RGB',
    'rgb_to_xyz',
    'xyz_to_rgb',

    'xyz_to_lab',
    'lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'luv_to_lch',
    'lch_to_luv',

    'unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'unit_rgb_to_hsl',
    'hsl_to_unit_rgb',
    'hsv_to_hsl',
    'hsl_to_hsv',

    'adapt',
    'adaptation_matrix',
    'AdaptationMethod',

    'convert',
]
