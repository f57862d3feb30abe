"""
Immutable color classes.

Every class stores three channels as a tuple and is frozen after
``__init__``. Illuminant-relative spaces (XYZ, Lab, Luv, LCh) also carry the
reference white they are measured against.

>>> from chromalab.colors import ColorUnitRGB, ColorLab
>>> red = ColorUnitRGB((1.0, 0.0, 0.0))
>>> lab = red.convert("lab")
>>> round(lab.value[0], 2)
53.24

Color Classes
-------------
RGB:
    - ColorUnitRGB: sRGB, float 0..1
    - ColorRGBINT: sRGB, integer 0..255
    - ColorLinearRGB: linear-light sRGB
    - ColorAdobeRGB: Adobe RGB (1998)
    - ColorProPhotoRGB: ProPhoto (ROMM) RGB, D50
CIE (illuminant-relative):
    - ColorXYZ, ColorLab, ColorLuv, ColorLCHab, ColorLCHuv
Hexagonal projections of sRGB:
    - UnitHSV, UnitHSL
"""

from .color_base import ColorBase
from .rgb import ColorRGBINT, ColorUnitRGB, ColorLinearRGB, ColorAdobeRGB, ColorProPhotoRGB
from .xyz import ColorXYZ
from .lab import ColorLab, ColorLCHab
from .luv import ColorLuv, ColorLCHuv
from .hsv import UnitHSV, UnitHSL
from .color import (
    color_convert,
    convert_color,
    get_color_class,
    shared_illuminant,
    unified_tuple_to_class,
)

__all__ = [
    'ColorBase',
    'ColorRGBINT',
    'ColorUnitRGB',
    'ColorLinearRGB',
    'ColorAdobeRGB',
    'ColorProPhotoRGB',
    'ColorXYZ',
    'ColorLab',
    'ColorLCHab',
    'ColorLuv',
    'ColorLCHuv',
    'UnitHSV',
    'UnitHSL',
    'color_convert',
    'convert_color',
    'get_color_class',
    'shared_illuminant',
    'unified_tuple_to_class',
]
